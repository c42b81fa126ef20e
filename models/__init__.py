from .database import (
    Base,
    Spec,
    VehicleModel,
    get_engine,
    init_db,
)

__all__ = ['Base', 'Spec', 'VehicleModel', 'get_engine', 'init_db']
