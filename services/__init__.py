"""
Servicios de acceso a APIs remotas de geolocalización.
"""
