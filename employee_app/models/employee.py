from employee_app.extensions import db


class Employee(db.Model):
    __tablename__ = "employee"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    department_id = db.Column(
        db.Integer,
        db.ForeignKey("department.id"),
        nullable=False,
        index=True
    )

    department = db.relationship("Department", back_populates="employees")

    def __repr__(self):
        return f"<Employee {self.id} {self.name!r}>"
