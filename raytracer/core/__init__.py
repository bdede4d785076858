"""
Core algebra, raster buffer and image encoding.

This package contains the numeric foundation of the ray tracer:
tolerant scalars, point/vector/color algebra, the canvas and its PPM encoder.
"""
