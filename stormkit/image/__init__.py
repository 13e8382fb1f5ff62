"""Pixel images, PNG decoding and skyline rectangle packing."""