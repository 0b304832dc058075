from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from bizcards.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(256), nullable=False)
    middle_name = Column(String(256), nullable=False, server_default="")
    last_name = Column(String(256), nullable=False)
    phone = Column(String(11), nullable=False)
    # unique in practice only; checked by the service, not by a constraint
    email = Column(String(320), nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    image_url = Column(String(2048), nullable=True)
    image_alt = Column(String(256), nullable=True)
    state = Column(String(256), nullable=True)
    country = Column(String(256), nullable=False)
    city = Column(String(256), nullable=False)
    street = Column(String(256), nullable=False)
    house_number = Column(Integer, nullable=False)
    zip = Column(Integer, nullable=False)
    is_business = Column(Boolean, nullable=False, server_default="false")
    is_admin = Column(Boolean, nullable=False, server_default="false")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
