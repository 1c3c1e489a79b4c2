"""
Capa de servicios de la aplicación de gestión de la ferretería.

Uso:
    from bricolaje.app_container import AppContainer
    container = AppContainer({'DATA_DIR': '/srv/bricolaje/data'})
    container.position_manager.create(Position(id=5, description='EMPLEADO'))
"""

__version__ = '1.0.0'
