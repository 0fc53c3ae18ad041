"""
NumPy-backed implementations of the keynum containers and kernels.
"""
