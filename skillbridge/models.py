from skillbridge import db

ROLES = ('entrepreneur', 'freelance')

# Exclusive upper bounds of the Numeric(12, 2) and Numeric(10, 2) columns
BUDGET_LIMIT = 10 ** 10
HOURLY_RATE_LIMIT = 10 ** 8


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    surname = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True)
    password_hash = db.Column(db.Text, nullable=False)
    role = db.Column(db.String(20), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    __table_args__ = (
        db.CheckConstraint("role IN ('entrepreneur', 'freelance')", name='users_role_check'),
    )


class EntrepreneurProfile(db.Model):
    __tablename__ = 'entrepreneurs'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'),
                        nullable=False, unique=True)
    city = db.Column(db.String(100))
    phone = db.Column(db.String(50))
    birth_date = db.Column(db.Date)
    project_name = db.Column(db.String(255), nullable=False)
    sector = db.Column(db.String(255))
    desired_skills = db.Column(db.Text)
    description = db.Column(db.Text)
    budget = db.Column(db.Numeric(12, 2))
    deadline = db.Column(db.Date)
    document = db.Column(db.String(255))


class FreelanceProfile(db.Model):
    __tablename__ = 'freelances'

    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    bio = db.Column(db.Text, default='')
    portfolio = db.Column(db.Text, default='')
    city = db.Column(db.String(100))
    phone = db.Column(db.String(50))
    birth_date = db.Column(db.Date)
    years_experience = db.Column(db.Integer)
    hourly_rate = db.Column(db.Numeric(10, 2))
    availability = db.Column(db.String(255))


class Skill(db.Model):
    __tablename__ = 'skills'

    id = db.Column(db.Integer, primary_key=True)
    # Always stored lower-cased, so the plain unique constraint is case-insensitive
    name = db.Column(db.String(100), nullable=False, unique=True)


class FreelanceSkill(db.Model):
    __tablename__ = 'freelance_skills'

    freelance_id = db.Column(db.Integer, db.ForeignKey('freelances.user_id', ondelete='CASCADE'),
                             primary_key=True)
    skill_id = db.Column(db.Integer, db.ForeignKey('skills.id', ondelete='CASCADE'), primary_key=True)


class Listing(db.Model):
    __tablename__ = 'listings'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    desired_skills = db.Column(db.Text)
    estimated_budget = db.Column(db.Numeric(12, 2), nullable=False)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    author_type = db.Column(db.String(20), nullable=False, default='entrepreneur')
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class Collaboration(db.Model):
    __tablename__ = 'collaborations'

    id = db.Column(db.Integer, primary_key=True)
    listing_id = db.Column(db.Integer, db.ForeignKey('listings.id', ondelete='CASCADE'), nullable=False)
    freelance_id = db.Column(db.Integer, db.ForeignKey('freelances.user_id', ondelete='CASCADE'),
                             nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    __table_args__ = (
        db.UniqueConstraint('listing_id', 'freelance_id', name='unique_listing_freelance'),
    )
