import pytest
from minitensor.helpers import all_int, colored, getenv, normalize_shape, prod, strides_for

def test_prod():
  assert prod((2, 3, 4)) == 24
  assert prod(()) == 1
  assert prod([5, 0]) == 0

def test_normalize_shape():
  assert normalize_shape(2, 3) == (2, 3)
  assert normalize_shape((2, 3)) == (2, 3)
  assert normalize_shape([2, 3]) == (2, 3)
  assert normalize_shape() == ()
  with pytest.raises(ValueError): normalize_shape((1, 2), 3)

def test_strides_for():
  assert strides_for((2, 3, 4)) == (12, 4, 1)
  assert strides_for((5,)) == (1,)
  assert strides_for(()) == ()

def test_all_int():
  assert all_int((1, 2, 3))
  assert not all_int((1, 2.0))
  assert not all_int((True, 2))

def test_getenv(monkeypatch):
  monkeypatch.setenv("MINITENSOR_TEST_KNOB", "3")
  assert getenv("MINITENSOR_TEST_KNOB", 0) == 3
  assert getenv("MINITENSOR_TEST_UNSET_KNOB", 7) == 7

def test_colored():
  assert colored("add", None) == "add"
  assert colored("add", "cyan") == "\u001b[36madd\u001b[0m"
