from app.models.user import User
from app.models.route import Route
from app.models.seat import Seat

# This makes the models directory a Python package and ensures all models are loaded
