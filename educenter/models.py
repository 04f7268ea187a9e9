from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


# ============================================================================
# GEOGRAPHY
# ============================================================================


class City(Base):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    districts = relationship(
        "District", back_populates="city", cascade="all, delete", passive_deletes=True
    )


class District(Base):
    __tablename__ = "districts"

    id = Column(Integer, primary_key=True, index=True)
    city_id = Column(Integer, ForeignKey("cities.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    city = relationship("City", back_populates="districts")
    subdistricts = relationship(
        "Subdistrict", back_populates="district", cascade="all, delete", passive_deletes=True
    )


class Subdistrict(Base):
    """Smallest administrative unit (khoroo) a branch is located in"""

    __tablename__ = "subdistricts"

    id = Column(Integer, primary_key=True, index=True)
    district_id = Column(
        Integer, ForeignKey("districts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    district = relationship("District", back_populates="subdistricts")
    branches = relationship("Branch", back_populates="subdistrict")


# ============================================================================
# EDUCATION CENTERS
# ============================================================================


class EducationCenter(Base):
    __tablename__ = "education_centers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    image = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    branches = relationship(
        "Branch", back_populates="education_center", cascade="all, delete", passive_deletes=True
    )
    workers = relationship(
        "User", back_populates="work_education_center", cascade="all, delete", passive_deletes=True
    )
    announcements = relationship("Announcement", back_populates="education_center")


class Branch(Base):
    __tablename__ = "branches"

    id = Column(Integer, primary_key=True, index=True)
    education_center_id = Column(
        Integer, ForeignKey("education_centers.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name = Column(String(100), nullable=True)
    subdistrict_id = Column(
        Integer, ForeignKey("subdistricts.id", ondelete="SET NULL"), nullable=True, index=True
    )
    other_description = Column(Text, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    image = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    education_center = relationship("EducationCenter", back_populates="branches")
    subdistrict = relationship("Subdistrict", back_populates="branches")
    courses = relationship(
        "Course", back_populates="branch", cascade="all, delete", passive_deletes=True
    )
    reviews = relationship("Review", back_populates="branch")


class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True, index=True)
    education_center_id = Column(
        Integer, ForeignKey("education_centers.id", ondelete="SET NULL"), nullable=True, index=True
    )
    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    education_center = relationship("EducationCenter", back_populates="announcements")


class FAQ(Base):
    __tablename__ = "faqs"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=True)
    answer = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


# ============================================================================
# COURSES
# ============================================================================


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    branch_id = Column(Integer, ForeignKey("branches.id", ondelete="CASCADE"), nullable=True, index=True)
    name = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    start_date = Column(DateTime, nullable=True)
    end_date = Column(DateTime, nullable=True)
    enrollment_start_date = Column(DateTime, nullable=True)
    enrollment_end_date = Column(DateTime, nullable=True)
    max_students = Column(Integer, nullable=True)
    current_students = Column(Integer, default=0, nullable=True)
    image = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    branch = relationship("Branch", back_populates="courses")
    contracts = relationship("Contract", back_populates="course")
    tags = relationship("CourseTag", secondary="course_tag_mappings", back_populates="courses", viewonly=True)
    students = relationship("User", secondary="enrollments", back_populates="courses", viewonly=True)


class CourseTag(Base):
    __tablename__ = "course_tags"

    id = Column(Integer, primary_key=True, index=True)
    tag_name = Column(String(100), nullable=True)

    courses = relationship("Course", secondary="course_tag_mappings", back_populates="tags", viewonly=True)


class CourseTagMapping(Base):
    __tablename__ = "course_tag_mappings"
    __table_args__ = (UniqueConstraint("course_id", "tag_id", name="uq_course_tag_mapping"),)

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=True, index=True)
    tag_id = Column(Integer, ForeignKey("course_tags.id", ondelete="CASCADE"), nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


# ============================================================================
# USERS
# ============================================================================


class UserRole(Base):
    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True, index=True)
    role_name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    users = relationship("User", back_populates="user_role")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(100), unique=True, index=True, nullable=True)
    password = Column(String(255), nullable=True)  # bcrypt hash, never the plain value
    name = Column(String(100), nullable=True)
    work_education_center_id = Column(
        Integer, ForeignKey("education_centers.id", ondelete="CASCADE"), nullable=True, index=True
    )
    user_role_id = Column(Integer, ForeignKey("user_roles.id"), nullable=False, index=True)
    profile_image = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user_role = relationship("UserRole", back_populates="users")
    work_education_center = relationship("EducationCenter", back_populates="workers")
    courses = relationship("Course", secondary="enrollments", back_populates="students", viewonly=True)
    enrollments = relationship(
        "Enrollment", back_populates="user", cascade="all, delete", passive_deletes=True
    )
    contracts = relationship("Contract", back_populates="user")
    payments = relationship("Payment", back_populates="user")
    reviews = relationship("Review", back_populates="user")
    notifications = relationship("Notification", back_populates="user")
    search_histories = relationship("SearchHistory", back_populates="user")


class Enrollment(Base):
    __tablename__ = "enrollments"
    __table_args__ = (UniqueConstraint("user_id", "course_id", name="uq_enrollment_user_course"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="enrollments")


# ============================================================================
# CONTRACTS & PAYMENTS
# ============================================================================


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="SET NULL"), nullable=True, index=True)
    content = Column(Text, nullable=True)
    status = Column(String(50), nullable=True)  # pending, approved, rejected
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="contracts")
    course = relationship("Course", back_populates="contracts")
    payments = relationship("Payment", back_populates="contract")


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    contract_id = Column(Integer, ForeignKey("contracts.id", ondelete="SET NULL"), nullable=True, index=True)
    amount = Column(Float, nullable=True)
    status = Column(String(255), nullable=True)
    method = Column(String(50), nullable=True)  # credit_card, paypal, cash
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="payments")
    contract = relationship("Contract", back_populates="payments")


# ============================================================================
# FEEDBACK & ACTIVITY
# ============================================================================


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    branch_id = Column(Integer, ForeignKey("branches.id", ondelete="SET NULL"), nullable=True, index=True)
    rating = Column(Integer, nullable=True)  # 1 to 5
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="reviews")
    branch = relationship("Branch", back_populates="reviews")


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    content = Column(String(255), nullable=True)
    seen = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="notifications")


class SearchHistory(Base):
    __tablename__ = "search_histories"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    query = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="search_histories")
