"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for service endpoints, UI labels and timings.
"""
import re

BRAND_NAME = "Biblioteca Digital"

# Remote catalog services (fixed; no environment override)
AUTHORS_BASE_URL = "https://autorapiweb.somee.com/api/Autor"
BOOKS_BASE_URL = "https://localhost:32783/api/LibroMaterial"

# Seconds a success notification stays visible
SUCCESS_DISMISS_SECONDS = 3.0

UUID_RE = re.compile(
    r'^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$')

NETWORK_ERROR_MESSAGE = "No se pudo conectar con el servicio"

# Validation messages
MSG_GIVEN_NAME_REQUIRED = "El nombre es requerido"
MSG_FAMILY_NAME_REQUIRED = "El apellido es requerido"
MSG_BIRTH_DATE_REQUIRED = "La fecha de nacimiento es requerida"
MSG_TITLE_REQUIRED = "El título es requerido"
MSG_PUBLICATION_DATE_REQUIRED = "La fecha de publicación es requerida"
MSG_AUTHOR_ID_REQUIRED = "El ID del autor es requerido"
MSG_BOOK_ID_REQUIRED = "El ID del libro es requerido"
MSG_FUTURE_DATE = "La fecha no puede ser futura"
MSG_INVALID_UUID = "Ingrese un UUID válido"
