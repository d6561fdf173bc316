"""tablescaffold -- strategy-driven CRUD scaffolding for drizzle/Next.js projects."""

__version__ = "0.1.0"
