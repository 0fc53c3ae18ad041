"""
Domain layer: contracts, descriptors and errors with no backend dependency
beyond dtype resolution.
"""
