"""Game building blocks: colors, vectors, rects, circles, shape geometry, input state, shader includes, storage, animation and profiling."""

__version__ = "0.1.0"