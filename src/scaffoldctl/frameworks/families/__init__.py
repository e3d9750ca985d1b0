"""Built-in framework family tables, in registration order."""

from scaffoldctl.frameworks.families.frontend import NEXT, NUXT, REACT, VITE, VUE
from scaffoldctl.frameworks.families.jvm import SPRING_BOOT
from scaffoldctl.frameworks.families.node import EXPRESS, FASTIFY, NESTJS
from scaffoldctl.frameworks.families.python import DJANGO, FASTAPI, FLASK

BUILTIN_FAMILIES = (
    SPRING_BOOT,
    REACT,
    VUE,
    FASTAPI,
    DJANGO,
    FLASK,
    VITE,
    EXPRESS,
    FASTIFY,
    NESTJS,
    NEXT,
    NUXT,
)

__all__ = ["BUILTIN_FAMILIES"]
