"""Core del SDK: configuración, errores, dominio y construcción de peticiones."""
