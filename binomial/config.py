"""Configuraciones de la calculadora de correlación binomial.

Este módulo centraliza:
- Umbral de desviación por defecto
- Formato y nivel de logs
- Constantes numéricas del cálculo
"""
import os
from dotenv import load_dotenv

# Cargar variables de entorno del archivo .env
load_dotenv()

# Umbral SD que se propone cuando el usuario no indica otro
DEFAULT_SD_THRESHOLD = float(os.getenv("BINOMIAL_DEFAULT_SD_THRESHOLD", 2.0))

# Formato de Registro (Logging)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Servidor web
PORT = int(os.getenv("PORT", 8000))

# Tamaño mínimo del sub-rango para que la proporción tenga sentido
MIN_SUBRANGE_SIZE = 3

# Escala la MAD para que sea comparable a una desviación estándar (normal)
ROBUST_Z_CONSTANT = 0.6745
