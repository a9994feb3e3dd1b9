import click
from flask import current_app
from models import db
from classes.seed_manager import SeedManager


def register_commands(app):
    """Attach the database maintenance commands to the Flask CLI."""

    @app.cli.command("init-db")
    def init_db():
        """Create all tables (use `flask db upgrade` for migrations)."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed")
    def seed():
        """Load the admin account, planets, moons and starter quizzes."""
        db.create_all()
        _, created = SeedManager.ensure_admin(
            current_app.config["ADMIN_EMAIL"], current_app.config["ADMIN_PASSWORD"]
        )
        click.echo(f"Admin {'created' if created else 'already exists'}: {current_app.config['ADMIN_EMAIL']}")

        planets, moons = SeedManager.seed_planets()
        click.echo(f"Planets added: {planets}, moons added: {moons}")

        quizzes = SeedManager.seed_quizzes()
        click.echo(f"Quizzes added: {quizzes}")

    @app.cli.command("create-admin")
    @click.argument("email")
    @click.argument("name")
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    @click.option("--role", default="admin", type=click.Choice(["teacher", "admin"]))
    def create_admin(email, name, password, role):
        """Create a teacher account, admin by default."""
        try:
            teacher = SeedManager.create_teacher(email, name, password, role)
        except ValueError as e:
            raise click.ClickException(str(e))
        click.echo(f"Created {teacher.role} {teacher.email}")

    @app.cli.command("set-password")
    @click.argument("email")
    @click.argument("password")
    def set_password(email, password):
        """Reset a teacher's password."""
        if not SeedManager.set_password(email, password):
            raise click.ClickException("Teacher not found!")
        click.echo("Password updated successfully!")
