from __future__ import annotations
from typing import Self

Scalar = int|float

class ComputeMixin():
  __slots__ = ()
  # required to implement
  def add(self, other:Self) -> Self: raise NotImplementedError
  def subtract(self, other:Self) -> Self: raise NotImplementedError
  def scalar_multiply(self, scalar:Scalar) -> Self: raise NotImplementedError

  # great functions you get!
  def neg(self) -> Self: return self.scalar_multiply(-1)

  def __neg__(self): return self.neg()
  def __add__(self, x:Self): return self.add(x)
  def __sub__(self, x:Self): return self.subtract(x)
  def __mul__(self, x:Scalar): return self.scalar_multiply(x)

  def __radd__(self, x:Self): return self.add(x)
  def __rsub__(self, x:Self): return self.neg().add(x)
  def __rmul__(self, x:Scalar): return self.scalar_multiply(x)
  # NOTE: __eq__ isn't overridden, and means the same thing as is by default
