"""
Brick Layout Package
====================

Procedural brick wall generation for a breakout-style game. The packer
fills a rectangular region with non-overlapping square bricks of varying
size, growing outward from a random seed brick.

Rendering, physics bodies and scoring are left to the game; this package
only decides where the bricks go and how big they are.

All tunable parameters are in layout_config.yaml.
"""
