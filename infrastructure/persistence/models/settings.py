from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class SettingDB(Base):
	__tablename__ = 'settings'

	key: Mapped[str] = mapped_column(String(64), primary_key=True)
	value: Mapped[str] = mapped_column(Text, nullable=False)
