"""Adaptadores de I/O: transporte HTTP, dispatcher y facades por recurso."""
