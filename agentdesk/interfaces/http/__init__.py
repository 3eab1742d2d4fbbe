"""HTTP routers, dependencies and presenters."""
