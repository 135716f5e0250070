"""Rendering subpackage.

Turns a display text plus an immutable :class:`glyph_mask.grid.MaskingGrid`
snapshot into something visible. Composition is pull-based: the driver never
calls into the renderer.

* :mod:`glyph_mask.renderer.text` walks glyph bitmaps and both masking layers
  to produce the character matrix (glyph pixels read the dynamic layer,
  everything else reads the static layer).
* :mod:`glyph_mask.renderer.image` rasterizes that matrix with Pillow.
"""
