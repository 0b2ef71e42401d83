"""
Administrator model
"""
from sqlalchemy import Column, Integer, String, Date, ForeignKey
from vendor_console.database import Base


class User(Base):
    """Administrator: login principal and possible project manager"""
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(255), nullable=False, index=True)
    phone_no = Column(String(30))
    dob = Column(Date)
    joining_date = Column(Date)
    department = Column(Integer, ForeignKey("departments.id"), nullable=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
