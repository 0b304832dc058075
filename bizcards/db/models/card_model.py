from sqlalchemy import BigInteger, Column, Integer, String, DateTime, Text, func, text
from sqlalchemy.dialects.postgresql import ARRAY
from bizcards.db.base import Base


class Card(Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(256), nullable=False)
    subtitle = Column(String(256), nullable=False)
    description = Column(Text, nullable=False, server_default="")
    phone = Column(String(11), nullable=False)
    email = Column(String(320), nullable=False)
    web = Column(String(2048), nullable=True)
    image_url = Column(String(2048), nullable=True)
    image_alt = Column(String(256), nullable=True)
    state = Column(String(256), nullable=True)
    country = Column(String(256), nullable=False)
    city = Column(String(256), nullable=False)
    street = Column(String(256), nullable=False)
    house_number = Column(Integer, nullable=False)
    zip = Column(Integer, nullable=False)
    biz_number = Column(BigInteger, unique=True, nullable=False, index=True)
    # owner reference without a foreign key: deleting a user keeps their cards
    user_id = Column(Integer, nullable=False, index=True)
    likes = Column(ARRAY(Integer), nullable=False, server_default=text("'{}'"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Card(id={self.id}, biz_number={self.biz_number})>"
