"""Fixed EGL answers for a single 960x544 OpenGL ES display."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count

from soloader.logger import LogType, log_print

EGL_FALSE = 0
EGL_TRUE = 1

EGL_BAD_ATTRIBUTE = 0x3004
EGL_BAD_PARAMETER = 0x300C

EGL_OPENGL_ES_API = 0x30A0

EGL_CONFIG_ID = 0x3028
EGL_HEIGHT = 0x3056
EGL_WIDTH = 0x3057
EGL_TEXTURE_FORMAT = 0x3080
EGL_TEXTURE_TARGET = 0x3081
EGL_SWAP_BEHAVIOR = 0x3093
EGL_LARGEST_PBUFFER = 0x3058
EGL_MIPMAP_TEXTURE = 0x3082
EGL_MIPMAP_LEVEL = 0x3083
EGL_MULTISAMPLE_RESOLVE = 0x3099
EGL_HORIZONTAL_RESOLUTION = 0x3090
EGL_VERTICAL_RESOLUTION = 0x3091
EGL_PIXEL_ASPECT_RATIO = 0x3092
EGL_RENDER_BUFFER = 0x3086
EGL_VG_COLORSPACE = 0x3087
EGL_VG_COLORSPACE_sRGB = 0x3089
EGL_VG_ALPHA_FORMAT = 0x3088
EGL_VG_ALPHA_FORMAT_NONPRE = 0x308B
EGL_TIMESTAMPS_ANDROID = 0x3430
EGL_DISPLAY_SCALING = 10000
EGL_BUFFER_PRESERVED = 0x3094
EGL_MULTISAMPLE_RESOLVE_DEFAULT = 0x309A
EGL_BACK_BUFFER = 0x3084
EGL_ALPHA_SIZE = 0x3021
EGL_ALPHA_MASK_SIZE = 0x303E
EGL_BIND_TO_TEXTURE_RGB = 0x3039
EGL_BIND_TO_TEXTURE_RGBA = 0x303A
EGL_BLUE_SIZE = 0x3022
EGL_BUFFER_SIZE = 0x3020
EGL_COLOR_BUFFER_TYPE = 0x303F
EGL_CONFIG_CAVEAT = 0x3027
EGL_CONFORMANT = 0x3042
EGL_DEPTH_SIZE = 0x3025
EGL_GREEN_SIZE = 0x3023
EGL_LEVEL = 0x3029
EGL_LUMINANCE_SIZE = 0x303D
EGL_MAX_PBUFFER_WIDTH = 0x302C
EGL_MAX_PBUFFER_HEIGHT = 0x302A
EGL_MAX_PBUFFER_PIXELS = 0x302B
EGL_MAX_SWAP_INTERVAL = 0x303C
EGL_MIN_SWAP_INTERVAL = 0x303B
EGL_NATIVE_RENDERABLE = 0x302D
EGL_NATIVE_VISUAL_ID = 0x302E
EGL_NATIVE_VISUAL_TYPE = 0x302F
EGL_RED_SIZE = 0x3024
EGL_RENDERABLE_TYPE = 0x3040
EGL_SAMPLE_BUFFERS = 0x3032
EGL_SAMPLES = 0x3031
EGL_STENCIL_SIZE = 0x3026
EGL_SURFACE_TYPE = 0x3033
EGL_TRANSPARENT_TYPE = 0x3034
EGL_TRANSPARENT_RED_VALUE = 0x3037
EGL_TRANSPARENT_GREEN_VALUE = 0x3036
EGL_TRANSPARENT_BLUE_VALUE = 0x3035
EGL_RGB_BUFFER = 0x308E
EGL_NONE = 0x3038
EGL_TEXTURE_RGBA = 0x305E
EGL_TEXTURE_2D = 0x305F
EGL_PBUFFER_BIT = 0x0001
EGL_PIXMAP_BIT = 0x0002
EGL_WINDOW_BIT = 0x0004
EGL_OPENGL_ES_BIT = 0x0001
EGL_OPENVG_BIT = 0x0002
EGL_OPENGL_ES2_BIT = 0x0004
EGL_OPENGL_BIT = 0x0008
EGL_CONTEXT_CLIENT_TYPE = 0x3097
EGL_CONTEXT_CLIENT_VERSION = 0x3098
EGL_VENDOR = 0x3053
EGL_VERSION = 0x3054
EGL_EXTENSIONS = 0x3055
EGL_CLIENT_APIS = 0x308D

SURFACE_WIDTH = 960
SURFACE_HEIGHT = 544
DISPLAY_DPI = 220


class EglError(Exception):
    """An EGL call was given an attribute or parameter it does not know."""

    def __init__(self, code, message):
        super().__init__(message)
        self.code = code


_handle_ids = count(1)


@dataclass(frozen=True)
class _Handle:
    kind: str
    ident: int = field(default_factory=lambda: next(_handle_ids))


_CONTEXT_ATTRIBUTES = {
    EGL_CONFIG_ID: 0,
    EGL_CONTEXT_CLIENT_TYPE: EGL_OPENGL_ES_API,
    EGL_CONTEXT_CLIENT_VERSION: 2,
    EGL_RENDER_BUFFER: EGL_BACK_BUFFER,
}

_SURFACE_ATTRIBUTES = {
    EGL_CONFIG_ID: 0,
    EGL_WIDTH: SURFACE_WIDTH,
    EGL_HEIGHT: SURFACE_HEIGHT,
    EGL_TEXTURE_FORMAT: EGL_TEXTURE_RGBA,
    EGL_TEXTURE_TARGET: EGL_TEXTURE_2D,
    EGL_SWAP_BEHAVIOR: EGL_BUFFER_PRESERVED,
    EGL_LARGEST_PBUFFER: EGL_FALSE,
    EGL_MIPMAP_TEXTURE: EGL_FALSE,
    EGL_MIPMAP_LEVEL: 0,
    EGL_MULTISAMPLE_RESOLVE: EGL_MULTISAMPLE_RESOLVE_DEFAULT,
    EGL_HORIZONTAL_RESOLUTION: DISPLAY_DPI * EGL_DISPLAY_SCALING,
    EGL_VERTICAL_RESOLUTION: DISPLAY_DPI * EGL_DISPLAY_SCALING,
    # Integer ratio, scaled as the specification asks.
    EGL_PIXEL_ASPECT_RATIO: SURFACE_WIDTH // SURFACE_HEIGHT * EGL_DISPLAY_SCALING,
    EGL_RENDER_BUFFER: EGL_BACK_BUFFER,
    EGL_VG_COLORSPACE: EGL_VG_COLORSPACE_sRGB,
    EGL_VG_ALPHA_FORMAT: EGL_VG_ALPHA_FORMAT_NONPRE,
    EGL_TIMESTAMPS_ANDROID: EGL_FALSE,
}

_CONFIG_ATTRIBUTES = {
    EGL_ALPHA_SIZE: 8,
    EGL_ALPHA_MASK_SIZE: 8,
    EGL_BIND_TO_TEXTURE_RGB: EGL_TRUE,
    EGL_BIND_TO_TEXTURE_RGBA: EGL_TRUE,
    EGL_BLUE_SIZE: 8,
    EGL_BUFFER_SIZE: 32,
    EGL_COLOR_BUFFER_TYPE: EGL_RGB_BUFFER,
    EGL_CONFIG_CAVEAT: EGL_NONE,
    EGL_CONFIG_ID: 0,
    EGL_CONFORMANT: 0,
    EGL_DEPTH_SIZE: 24,
    EGL_GREEN_SIZE: 8,
    EGL_LEVEL: 0,
    EGL_LUMINANCE_SIZE: 0,
    EGL_MAX_PBUFFER_WIDTH: 0,
    EGL_MAX_PBUFFER_HEIGHT: 0,
    EGL_MAX_PBUFFER_PIXELS: 0,
    EGL_MAX_SWAP_INTERVAL: 0,
    EGL_MIN_SWAP_INTERVAL: 0,
    EGL_NATIVE_RENDERABLE: 0,
    EGL_NATIVE_VISUAL_ID: 0,
    EGL_NATIVE_VISUAL_TYPE: 0,
    EGL_RED_SIZE: 8,
    EGL_RENDERABLE_TYPE: EGL_OPENGL_ES_BIT | EGL_OPENGL_ES2_BIT | EGL_OPENGL_BIT,
    EGL_SAMPLE_BUFFERS: 0,
    EGL_SAMPLES: 0,
    EGL_STENCIL_SIZE: 8,
    EGL_SURFACE_TYPE: EGL_WINDOW_BIT,
    EGL_TRANSPARENT_TYPE: 0,
    EGL_TRANSPARENT_RED_VALUE: 0,
    EGL_TRANSPARENT_GREEN_VALUE: 0,
    EGL_TRANSPARENT_BLUE_VALUE: 0,
}

_STRINGS = {
    EGL_CLIENT_APIS: "OpenGL OpenGL_ES",
    EGL_VENDOR: "Rinnegatamante",
    EGL_VERSION: "2.2 VitaGL",
    EGL_EXTENSIONS: (
        "EGL_KHR_image "
        "EGL_KHR_image_base "
        "EGL_KHR_image_pixmap "
        "EGL_KHR_gl_texture_2D_image "
        "EGL_KHR_gl_texture_cubemap_image "
        "EGL_KHR_gl_renderbuffer_image "
        "EGL_KHR_fence_sync "
        "EGL_NV_system_time "
        "EGL_ANDROID_image_native_buffer "
    ),
}


def _lookup(table, attribute, caller):
    try:
        return table[attribute]
    except KeyError:
        log_print(LogType.ERROR, "%s / EGL_BAD_ATTRIBUTE: 0x%x", caller, attribute)
        raise EglError(EGL_BAD_ATTRIBUTE, f"{caller}: bad attribute 0x{attribute:x}") from None


def initialize():
    """Initialise the display and return the EGL version as (major, minor)."""
    log_print(LogType.DEBUG, "eglInitialize()")
    return 2, 2


def query_context(attribute):
    """Return the value of a context attribute; raise EglError if unknown."""
    return _lookup(_CONTEXT_ATTRIBUTES, attribute, "eglQueryContext")


def query_surface(attribute):
    """Return the value of a surface attribute; raise EglError if unknown."""
    return _lookup(_SURFACE_ATTRIBUTES, attribute, "eglQuerySurface")


def get_config_attrib(attribute):
    """Return the value of a config attribute; raise EglError if unknown."""
    return _lookup(_CONFIG_ATTRIBUTES, attribute, "eglGetConfigAttrib")


def query_string(name):
    """Return the EGL string for ``name``, or None if there is none."""
    return _STRINGS.get(name)


def choose_config(want_configs):
    """Return ``(configs, num_config)``; there is always exactly one config.

    With ``want_configs`` false only the count is reported and the list is
    empty.
    """
    configs = [_Handle("conf")] if want_configs else []
    return configs, 1


def get_configs(config_size):
    """Return ``(configs, num_config)`` for room for ``config_size`` configs."""
    configs = [_Handle("conf")] if config_size > 0 else []
    return configs, 1


def create_context():
    """Return a new, distinct context handle."""
    return _Handle("ctx")


def create_window_surface():
    """Return a new, distinct window surface handle."""
    return _Handle("surface")