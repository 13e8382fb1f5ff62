"""Bounding boxes, interpolation, orthographic transforms and scalar helpers."""