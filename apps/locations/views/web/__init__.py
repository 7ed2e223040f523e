from .dashboard import dashboard_view

__all__ = ['dashboard_view']
