"""
CPU kernels: dense addressing (`dense_cpu`), sequence algorithms
(`sequence_cpu`) and random fills (`random_cpu`).
"""
