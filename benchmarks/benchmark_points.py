"""
Benchmark mapping 2D points through a composed transform (Numba kernel).
"""

import time

import numpy as np

from reltransform import TransformState
from reltransform.matrix.kernels import warmup_matrix_kernels

N = 1_000_000
NUM_ITERATIONS = 100

print("=" * 80)
print("2D POINT TRANSFORM BENCHMARK")
print(f"Testing with {N:,} points, {NUM_ITERATIONS} iterations")
print("=" * 80)

# Setup
points = np.random.randn(N, 2)
state = TransformState().trans(10.0, -5.0).rot_deg(30.0).scale(2.0, 0.5).shear(0.1, 0.0)

# Warmup
print("\nWarming up...")
warmup_matrix_kernels()
for _ in range(20):
    state.apply(points)

# Benchmark
print(f"Benchmarking {NUM_ITERATIONS} iterations...")
times = []
for _ in range(NUM_ITERATIONS):
    start = time.perf_counter()
    state.apply(points)
    times.append((time.perf_counter() - start) * 1000)

numpy_times = []
m = state.get_transform()
for _ in range(NUM_ITERATIONS):
    start = time.perf_counter()
    points @ m[:, :2].T + m[:, 2]
    numpy_times.append((time.perf_counter() - start) * 1000)

mean_time = np.mean(times)
std_time = np.std(times)

print("\nResults (1M points):")
print(f"  Numba:      {mean_time:.3f} ms +/- {std_time:.3f} ms")
print(f"  NumPy:      {np.mean(numpy_times):.3f} ms +/- {np.std(numpy_times):.3f} ms")
print(f"  Throughput: {N / mean_time * 1000 / 1e6:.1f}M points/sec")
