"""AuthCraft -- authentication scaffolding for Next.js projects."""

__version__ = "0.1.0"
