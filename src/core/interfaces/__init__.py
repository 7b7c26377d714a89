"""Contratos (Protocols) que el Core espera de la infraestructura."""
