"""Performance benchmarks (pyperf) for the multiplication kernels."""
