import os
from pagehost import create_app

app = create_app(os.getenv("FLASK_CONFIG", "production"))
