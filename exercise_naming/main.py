from fastapi import FastAPI

from exercise_naming import __version__

from .error_handlers import register_error_handlers
from .routes import home, names
from .utils.log import configure_logging

configure_logging()

app = FastAPI(title="Exercise Naming", version=__version__)

register_error_handlers(app)

app.include_router(home.router)
app.include_router(names.router)
