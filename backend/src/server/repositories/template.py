"""Template data-access layer.

Pure query functions, no business logic and no HTTP concerns.
Each function takes a session and returns models or None.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from server.models import Template


async def get_template(db: AsyncSession, template_id: str) -> Template | None:
    """Return the template with ``template_id``, or None."""
    return await db.get(Template, template_id)


async def get_template_by_name(db: AsyncSession, name: str) -> Template | None:
    stmt = select(Template).where(Template.name == name)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def add_template(db: AsyncSession, name: str, description: str, content: str) -> Template:
    """Insert a template and flush so constraint violations surface here."""
    template = Template(name=name, description=description, content=content)
    db.add(template)
    await db.flush()
    await db.refresh(template)
    return template
