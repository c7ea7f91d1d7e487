from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Note: Models are registered through app.db.models; Database.create_all() imports it
# All models must import Base from this module
