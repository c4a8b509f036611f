from __future__ import annotations
import functools, operator, os
from typing import Any, Iterable, Sequence, TypeGuard, TypeVar, overload

T = TypeVar("T")
def prod(input:Iterable[T]) -> T|int: return functools.reduce(operator.mul, input, 1) # NOTE: it returns int 1 if x is empty regardless of the type of x
def all_int(t: Sequence[Any]) -> TypeGuard[tuple[int, ...]]: return all(isinstance(s, int) and not isinstance(s, bool) for s in t)
def is_seq(x) -> bool: return isinstance(x, (list, tuple))

def normalize_shape(*args) -> tuple[int, ...]:
  if args and is_seq(args[0]):
    if len(args) != 1: raise ValueError(f"bad arg {args}") # i.e (1,2), 3
    return tuple(args[0])
  return args

def strides_for(shape:tuple[int, ...]) -> tuple[int, ...]: return tuple(prod(shape[i+1:]) for i in range(len(shape))) # row major, prod(()) is 1

@overload
def getenv(key:str) -> int: ...
@overload
def getenv(key:str, default:T) -> T: ...
@functools.cache
def getenv(key:str, default:Any=0): return type(default)(os.getenv(key, default))

DEBUG, SEED = getenv("DEBUG", 0), getenv("SEED", 0)

def colored(st, color:str|None, background=False): # replace the termcolor library
  colors = ['black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white']
  return f"\u001b[{10*background+60*(color.upper() == color)+30+colors.index(color.lower())}m{st}\u001b[0m" if color is not None else st
