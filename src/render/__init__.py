# Модуль рендеринга изолиний
from render.aa_line import draw_line, line_coverage
from render.blend import blend_pixel, set_pixel
from render.frame import fade_buffer, new_buffer, render_animation, render_frame
from render.solid_line import draw_solid_line, solid_line_pixels

__all__ = [
    'blend_pixel',
    'draw_line',
    'draw_solid_line',
    'fade_buffer',
    'line_coverage',
    'new_buffer',
    'render_animation',
    'render_frame',
    'set_pixel',
    'solid_line_pixels',
]
