# inspired by https://github.com/karpathy/micrograd/blob/master/micrograd/engine.py
#          and https://github.com/tinygrad/tinygrad/blob/master/tinygrad/tensor.py
from __future__ import annotations
from typing import Any, Callable
import json, numbers, operator, random

from minitensor.helpers import DEBUG, SEED, all_int, colored, is_seq, normalize_shape, prod, strides_for
from minitensor.mixins import ComputeMixin, Scalar

class InvalidArgument(TypeError): pass
class ShapeMismatch(ValueError): pass

_rng = random.Random(SEED or None) # SEED=0 means unseeded

def get_shape(x) -> tuple[int, ...]:
  # NOTE: only the first element of every level is inspected, fully_flatten catches jagged data
  shape, current = [], x
  while is_seq(current):
    shape.append(len(current))
    if len(current) == 0: break
    current = current[0]
  return tuple(shape)

def fully_flatten(x, shape:tuple[int, ...]) -> list:
  if len(shape) == 0:
    if is_seq(x): raise ShapeMismatch(f"inhomogeneous shape, expected a scalar but got {x!r}")
    return [x]
  if not is_seq(x) or len(x) != shape[0]: raise ShapeMismatch(f"inhomogeneous shape, expected {shape[0]} elements but got {x!r}")
  flattened = []
  for xi in x: flattened.extend(fully_flatten(xi, shape[1:]))
  return flattened

class Tensor(ComputeMixin):
  """
  the Tensor class is an ndarray backed by a single flat row-major storage list plus a shape and its strides.
  the nested python lists users construct tensors from (and read back with .data) are only a view:
  - construction infers the shape by descending through the first element of every level, then flattens into .storage
  - .data regroups .storage into nested lists with Tensor._reshape()
  element-wise ops never rebuild nested containers, they zip over the two storages since equal shapes imply equal strides.
  """

  # ************ Tensor Data + Constructors ************
  __slots__ = "shape", "stride", "storage"

  def __init__(self, source: Tensor|list|tuple|Any):
    if isinstance(source, Tensor): # shallow, shares storage with source
      self.shape, self.stride, self.storage = source.shape, source.stride, source.storage
      return
    if not is_seq(source) and hasattr(source, "tolist"): source = source.tolist() # np.ndarray and friends
    if not is_seq(source): raise InvalidArgument(f"Data must be an array, got {type(source).__name__}")

    self.shape: tuple[int, ...] = get_shape(source)
    self.stride: tuple[int, ...] = strides_for(self.shape)
    self.storage: list = fully_flatten(source, self.shape)
    if DEBUG >= 1: print(f"Tensor.__init__() inferred shape {self.shape} with stride {self.stride} from {len(self.storage)} elements")

  @staticmethod
  def _from_storage(shape: tuple[int, ...], storage: list) -> Tensor:
    ret = Tensor.__new__(Tensor)
    ret.shape, ret.stride, ret.storage = shape, strides_for(shape), storage
    return ret

  # high level: zeros, ones, random, arange
  @staticmethod
  def zeros(*shape) -> Tensor: return Tensor._fill(normalize_shape(*shape), lambda: 0)
  @staticmethod
  def ones(*shape) -> Tensor: return Tensor._fill(normalize_shape(*shape), lambda: 1)
  @staticmethod
  def random(*shape) -> Tensor: return Tensor._fill(normalize_shape(*shape), lambda: _rng.random() - 0.5) # uniform on [-0.5, 0.5)
  @staticmethod
  def arange(end: int) -> Tensor:
    if not all_int((end,)) or end < 0: raise InvalidArgument(f"arange end must be a non-negative int, got {end!r}")
    return Tensor(list(range(end)))
  @staticmethod
  def manual_seed(seed: int = 0) -> None: _rng.seed(seed)

  @staticmethod
  def _fill(shape: tuple[int, ...], fill: Callable[[], Scalar]) -> Tensor:
    if not all_int(shape) or any(s < 0 for s in shape): raise InvalidArgument(f"shape must be non-negative ints, got {shape}")
    numel = prod(shape)
    if DEBUG >= 1: print(f"Tensor._fill() generating {numel} elements for shape {shape}")
    return Tensor(Tensor._reshape([fill() for _ in range(numel)], shape)) # re-derive the shape through __init__

  @staticmethod
  def _reshape(flat: list, dimensions: tuple[int, ...]|list[int]) -> list:
    """
    _reshape() groups a flat list into nested lists matching dimensions, innermost dimension first:
    runs of dimensions[-1] elements, then runs of dimensions[-2] of those, and so on until one dimension remains.
    the input list is left untouched.
    """
    dimensions = tuple(dimensions)
    if prod(dimensions) != len(flat): raise ShapeMismatch(f"cannot reshape {len(flat)} elements into {dimensions}")
    nested = list(flat)
    for k in range(len(dimensions)-1, 0, -1):
      col, rows = dimensions[k], prod(dimensions[:k])
      nested = [nested[i*col:(i+1)*col] for i in range(rows)]
    return nested

  @property
  def data(self) -> list|Scalar:
    if len(self.shape) == 0: return self.storage[0]
    return Tensor._reshape(self.storage, self.shape)
  def tolist(self) -> list|Scalar: return self.data

  @property
  def dimensions(self) -> int: return len(self.shape)
  @property
  def size(self) -> tuple[int, ...]: return self.shape # NOTE: per-dimension sizes, not the element count. see .numel
  @property
  def ndim(self) -> int: return len(self.shape)
  @property
  def numel(self) -> int: return prod(self.shape) # np (and thus jax) call this .size

  # ************ Tensor Sugar ************
  def add(self, other: Tensor) -> Tensor:
    self._check_compatibility(other)
    return self._operate(other, operator.add)

  def subtract(self, other: Tensor) -> Tensor:
    self._check_compatibility(other)
    return self._operate(other, operator.sub)

  def scalar_multiply(self, scalar: Scalar) -> Tensor:
    if not isinstance(scalar, numbers.Real) or isinstance(scalar, bool): raise InvalidArgument(f"scalar_multiply expects a real scalar, got {type(scalar).__name__}")
    def mul(a, _): return a * scalar
    return self._operate(self, mul)

  def reshape(self, *shape) -> Tensor:
    new_shape = normalize_shape(*shape)
    if not all_int(new_shape) or any(s < 0 for s in new_shape): raise InvalidArgument(f"shape must be non-negative ints, got {new_shape}")
    if prod(new_shape) != self.numel: raise ShapeMismatch(f"cannot reshape {self.shape} into {new_shape}")
    return Tensor._from_storage(new_shape, self.storage)

  def _check_compatibility(self, other: Tensor):
    if not isinstance(other, Tensor): raise InvalidArgument(f"expected a Tensor operand, got {type(other).__name__}")
    if self.shape != other.shape: raise ShapeMismatch(f"Shapes must be the same for operations, {self.shape} != {other.shape}")

  def _operate(self, other: Tensor, operation: Callable[[Any, Any], Any]) -> Tensor:
    """
    ._operate() is the method every element-wise op funnels through.
    flat index i addresses the same multi-index in both operands, so the op is a single loop over storage.
    """
    if DEBUG >= 2: print(f"{colored(operation.__name__, 'cyan')} over {self.numel} elements with shape {self.shape}")
    return Tensor._from_storage(self.shape, [operation(a, b) for a, b in zip(self.storage, other.storage)])

  # ************ Debug Output ************
  def __repr__(self) -> str: return f"Tensor({self.data}, shape={self.shape})"
  def print(self) -> None: print(json.dumps(self.data, indent=2))

__all__ = ["Tensor", "InvalidArgument", "ShapeMismatch"]
