from flask_jwt_extended import JWTManager
from flask_marshmallow import Marshmallow


jwt = JWTManager()
ma = Marshmallow()
