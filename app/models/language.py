from sqlalchemy import Boolean, Column, Integer, String

from app.db import Base


class Language(Base):
    __tablename__ = "language"

    id = Column(Integer, primary_key=True)
    code = Column(String(10), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    menu_label = Column(String(20), nullable=True)
    flag_code = Column(String(10), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    # exactly one row is default; the admin side keeps that true
    is_default = Column(Boolean, nullable=False, default=False)
