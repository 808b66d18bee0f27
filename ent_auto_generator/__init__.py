"""Generate ent (entgo.io) schema definitions from Prisma DMMF documents."""

__version__ = "0.1.0"
