"""
Sliding Boxes Frontends
Renderers for displaying the boxes.

DUCK TYPING:
Any object with handle_input(), elapsed_ms(), render_frame(boxes) and
cleanup() can drive the game loop:

    renderer = PygameRenderer(640, 480)
    game.run(renderer)
"""

# Note: Don't import renderers here to avoid importing pygame
# when it might not be needed. Import directly in main.py instead.
