from numfuncs.functions.addition import addition
from numfuncs.functions.sort import sort, sort_async

__all__ = ["addition", "sort", "sort_async"]
