from minitensor import Tensor

def random_tensors():
  a, b = Tensor.random(2, 2, 2), Tensor.random(2, 2, 2)
  print("Tensor A:"); a.print()
  print("Tensor B:"); b.print()
  print("Tensor C (A + B):"); a.add(b).print()
  print("Tensor D (A - B):"); a.subtract(b).print()
  print("Tensor E (A * 2):"); a.scalar_multiply(2).print()

def nested_tensors():
  a = Tensor([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])
  b = Tensor([[[9, 10], [11, 12]], [[13, 14], [15, 16]]])
  print(f"shape {a.shape}, stride {a.stride}, numel {a.numel}")
  (a + b).print()
  (a - b).print()
  (2 * a).print()

def main():
  random_tensors()
  nested_tensors()

if __name__ == "__main__":
  main()
