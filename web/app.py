from fastapi import FastAPI

import logging
import sys
from binomial.config import LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT, PORT

# Configurar logging global
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT,
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

app = FastAPI(title="Binomial Correlation Calculator")

# Importar routers
from web.routes import calculator

# Incluir routers
app.include_router(calculator.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("web.app:app", host="0.0.0.0", port=PORT, reload=True)
