from .log import enable_logging, disable_logging
from .errors import InfiniteSetError, NotAComplementError, NotAUnionError
from .convert import FromComplement, from_complement
from .inf_set import InfSet, Kind

__all__ = [
    "InfSet",
    "Kind",
    "FromComplement",
    "from_complement",
    "InfiniteSetError",
    "NotAUnionError",
    "NotAComplementError",
    "enable_logging",
    "disable_logging",
]
