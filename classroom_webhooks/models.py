"""
Database records the webhook reads.

Classroom management creates all of these.  The only thing we ever write is
Organization.webhook_active.
"""

from classroom_webhooks import db


class Organization(db.Model):
    __tablename__ = "organizations"

    id = db.Column(db.Integer, primary_key=True)
    github_id = db.Column(db.BigInteger, unique=True, nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False, default="")
    webhook_active = db.Column(db.Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<Organization {self.github_id} active={self.webhook_active}>"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    uid = db.Column(db.BigInteger, unique=True, nullable=False, index=True)


class Assignment(db.Model):
    __tablename__ = "assignments"

    id = db.Column(db.Integer, primary_key=True)
    organization_id = db.Column(db.Integer, db.ForeignKey("organizations.id"))
    title = db.Column(db.String(255), nullable=False, default="")
    due_date = db.Column(db.DateTime(timezone=True), nullable=True)

    organization = db.relationship(Organization)


class GroupAssignment(db.Model):
    __tablename__ = "group_assignments"

    id = db.Column(db.Integer, primary_key=True)
    organization_id = db.Column(db.Integer, db.ForeignKey("organizations.id"))
    title = db.Column(db.String(255), nullable=False, default="")
    due_date = db.Column(db.DateTime(timezone=True), nullable=True)

    organization = db.relationship(Organization)


class AssignmentRepo(db.Model):
    """A repository created for one student's assignment."""
    __tablename__ = "assignment_repos"

    id = db.Column(db.Integer, primary_key=True)
    github_repo_id = db.Column(db.BigInteger, unique=True, nullable=False, index=True)
    assignment_id = db.Column(db.Integer, db.ForeignKey("assignments.id"))

    assignment = db.relationship(Assignment)


class GroupAssignmentRepo(db.Model):
    """A repository shared by a group for a group assignment."""
    __tablename__ = "group_assignment_repos"

    id = db.Column(db.Integer, primary_key=True)
    github_repo_id = db.Column(db.BigInteger, unique=True, nullable=False, index=True)
    group_assignment_id = db.Column(db.Integer, db.ForeignKey("group_assignments.id"))

    group_assignment = db.relationship(GroupAssignment)
