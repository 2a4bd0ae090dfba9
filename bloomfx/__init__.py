"""Floating-point raster images with bilinear sampling, up/downsampling filters and blending."""

__version__ = "0.1.0"
__all__ = ["image", "sampling"]