import click

from employee_app.extensions import db
from employee_app.services.seed_service import seed_demo_data


def register_commands(app):

    @app.cli.command("init-db")
    def init_db():
        """Create the department and employee tables."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed-demo")
    @click.option("--departments", type=int, default=None,
                  help="Generate this many departments instead of the fixed demo set.")
    @click.option("--employees-per-department", type=int, default=None,
                  help="Employees generated for each department.")
    def seed_demo(departments, employees_per_department):
        """Insert demo departments and employees into an empty database."""
        db.create_all()
        try:
            inserted = seed_demo_data(departments, employees_per_department)
        except ValueError as e:
            raise click.BadParameter(str(e))

        if inserted:
            click.echo(f"Seeded {inserted} departments.")
        else:
            click.echo("Departments already exist, nothing seeded.")
