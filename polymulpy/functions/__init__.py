"""Low-level polynomial multiplication kernels.

This subpackage contains the Numba-compiled routines behind
:mod:`polymulpy.kernels`. They take raw coefficient arrays with explicit
lengths, perform no validation, and write their results in place.
"""
