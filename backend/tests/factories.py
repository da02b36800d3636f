"""Factory functions for creating model instances in tests."""

from server.models import Template, User


def make_template(
    *,
    name: str = "welcome-email",
    description: str = "Sent after sign-up",
    content: str = "Hello {{ name }}, welcome aboard!",
) -> Template:
    return Template(name=name, description=description, content=content)


def make_user(
    *,
    email: str = "ada@example.com",
    name: str = "Ada Lovelace",
) -> User:
    return User(email=email, name=name)
