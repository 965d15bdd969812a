from employee_app.extensions import db


class Department(db.Model):
    __tablename__ = "department"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    # Loading strategy is picked per query in department_service
    employees = db.relationship(
        "Employee",
        back_populates="department",
        order_by="Employee.id",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Department {self.id} {self.name!r}>"
