"""Integer vectors, grids, timing and shared random helpers."""