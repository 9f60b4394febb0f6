"""Resource routers, one module per entity."""
