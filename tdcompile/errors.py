"""Error kinds and the exception raised while reading and compiling outlines."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Every failure the outline compiler can report, with its message."""

    LINE_END_NOT_LAST = "El caracter de final de línea debe ser el último"
    LINE_OPEN_NOT_LAST = "El caracter de apertura de nodo debe ser el último"
    LINE_CLOSE_NOT_LAST = "El caracter de cerrado de nodo debe ser el último"
    LINE_DOUBLE_CHAR = "Se encontró más de un caracter importante en la línea"
    LINE_EMPTY_STRING = "El string leído está vacío"
    LINE_OPEN_FILE = "Error al abrir el archivo"
    LINE_MISSING = "El numero de línea buscado no existe"
    LINE_FILE_EMPTY = "El archivo abierto se encuentra vacío"
    LINE_MALFORMED = "La linea que intenta obtener está mal escrita"
    LINE_FLAG_MISSING = "El bool que se busca en la línea no existe"
    OUTLINE_OPEN_FILE = "No se pudo abrir el archivo para guardar el topdown"
    OUTLINE_EMPTY = "El topdown a guardar está vacío, no se guardará"
    COMPILER_SOURCE = "Algo salió mal en la lectura del topdown"
    COMPILER_INDENT = "El dentado que tiene el archivo no es correcto"
    COMPILER_TITLE = "El titulo del topdown no pudo obtenerse correctamente"

    @property
    def message(self) -> str:
        """The human-readable message for this kind."""
        return self.value


class TopDownError(Exception):
    """Raised for any failure while handling an outline."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    @property
    def message(self) -> str:
        return self.kind.message