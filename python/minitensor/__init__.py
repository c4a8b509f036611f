"""
minitensor is a teaching-scale ndarray library, the smallest step from nested python lists toward a real tensor
1. tensor: `Tensor` keeps a flat row-major storage with a shape and strides, inferring the shape from nested lists
   and regrouping storage into nested lists on the way back out
2. mixins: python operator sugar (`+`, `-`, `*`) derived from the tensor's add, subtract and scalar_multiply
3. helpers: shape utilities and the env var knobs (DEBUG, SEED)

there is no broadcasting: shapes of operands must match exactly.
"""
from .tensor import InvalidArgument, ShapeMismatch, Tensor
__all__ = ["Tensor", "InvalidArgument", "ShapeMismatch"]
