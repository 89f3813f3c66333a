"""Command-line interface for LeadReach."""

import click
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from .database import SessionLocal, init_db, reset_db
from .exceptions import LeadReachError, PersistenceError
from .placeholders import (
    AUTO_PLACEHOLDERS,
    add_placeholder,
    classify,
    extract_placeholders,
    render,
    update_placeholder_value,
)
from .schemas import EmailTemplateCreate, ManualFields
from .services import EmailTemplateService, LeadService
from .utils.logger import logger


def _parse_values(values):
    parsed = []
    for item in values:
        if "=" not in item:
            raise click.BadParameter(f"Expected name=value, got '{item}'", param_hint="--value")
        name, value = item.split("=", 1)
        parsed.append((name.strip(), value))
    return parsed


@click.group()
def cli():
    """LeadReach CLI."""
    pass


# Database commands
@cli.group()
def db():
    """Database management commands."""
    pass


@db.command()
def init():
    """Initialize the database."""
    click.echo("Initializing database...")
    init_db()
    click.echo("✅ Database initialized successfully!")


@db.command()
@click.confirmation_option(prompt="Are you sure you want to drop all tables?")
def reset():
    """Reset the database (drop and recreate all tables)."""
    click.echo("Resetting database...")
    reset_db()
    click.echo("✅ Database reset successfully!")


# Template commands
@cli.group()
def template():
    """Email template commands."""
    pass


@template.command("placeholders")
def list_auto_placeholders():
    """Show the auto placeholders filled from lead data."""
    for entry in AUTO_PLACEHOLDERS:
        aliases = ", ".join(entry.aliases)
        click.echo(f"{{{{{entry.name}}}}}  {entry.label}  (alias: {aliases})")


@template.command("list")
def list_templates():
    """List all templates."""
    service = EmailTemplateService()
    with SessionLocal() as session:
        try:
            templates = service.list_templates(session)
        except PersistenceError as e:
            raise click.ClickException(str(e))

    if not templates:
        click.echo("No templates found.")
        return
    for tpl in templates:
        click.echo(f"{tpl.id:>4}  {tpl.name}  ({len(tpl.placeholders)} custom placeholders)")


@template.command("show")
@click.argument("template_id", type=int)
def show_template(template_id):
    """Show a template and its placeholders."""
    service = EmailTemplateService()
    with SessionLocal() as session:
        tpl = service.get_template(session, template_id)
    if not tpl:
        raise click.ClickException(f"Template {template_id} not found")

    click.echo(f"Name:    {tpl.name}")
    click.echo(f"Subject: {tpl.subject or ''}")
    click.echo("Body:")
    click.echo(tpl.body_template)
    click.echo("Placeholders:")
    for name in extract_placeholders(f"{tpl.subject or ''}\n{tpl.body_template}"):
        click.echo(f"  {name}  [{classify(name).value}]")
    for placeholder in tpl.placeholders:
        click.echo(f"  {placeholder.name} = {placeholder.value!r}")


@template.command("create")
@click.option("--name", prompt=True, help="Template name")
@click.option("--subject", default="", help="Subject line")
@click.option("--body", prompt=True, help="Email body with {{placeholders}}")
@click.option("--value", "values", multiple=True, help="Custom placeholder value as name=value")
def create_template(name, subject, body, values):
    """Create a new template."""
    service = EmailTemplateService()
    with SessionLocal() as session:
        try:
            placeholders = ()
            for raw_name, value in _parse_values(values):
                placeholders = add_placeholder(placeholders, raw_name)
                placeholders = update_placeholder_value(placeholders, placeholders[-1].name, value)

            payload = EmailTemplateCreate(
                name=name,
                subject=subject,
                body_template=body,
                manual_fields=ManualFields(custom_placeholders=list(placeholders)),
            )
            tpl = service.create_template(session, payload)
        except LeadReachError as e:
            raise click.ClickException(str(e))

    click.echo(f"✅ Created template {tpl.id}: {tpl.name}")


@template.command("delete")
@click.argument("template_id", type=int)
@click.confirmation_option(prompt="Are you sure you want to delete this template?")
def delete_template(template_id):
    """Delete a template."""
    service = EmailTemplateService()
    with SessionLocal() as session:
        try:
            deleted = service.delete_template(session, template_id)
        except PersistenceError as e:
            raise click.ClickException(str(e))

    if not deleted:
        raise click.ClickException(f"Template {template_id} not found")
    click.echo(f"✅ Deleted template {template_id}")


@template.command("render")
@click.argument("template_id", type=int)
@click.option("--lead-id", type=int, help="Lead whose data fills auto placeholders")
@click.option("--value", "values", multiple=True, help="Override a custom value as name=value")
def render_template(template_id, lead_id, values):
    """Render a template for one lead."""
    template_service = EmailTemplateService()
    lead_service = LeadService()

    with SessionLocal() as session:
        try:
            tpl = template_service.get_template(session, template_id)
            if not tpl:
                raise click.ClickException(f"Template {template_id} not found")
            lead = lead_service.get_lead_record(session, lead_id) if lead_id else {}
        except PersistenceError as e:
            raise click.ClickException(str(e))

    custom = {p.name: p.value for p in tpl.placeholders}
    custom.update(dict(_parse_values(values)))

    rendered = render(tpl, lead, custom)
    logger.debug(f"Rendered template {template_id} for lead {lead_id}")
    click.echo(f"Subject: {rendered.subject}")
    click.echo()
    click.echo(rendered.body)


# Lead commands
@cli.group()
def lead():
    """Lead management commands."""
    pass


@lead.command("add")
@click.option("--first-name", help="Contact first name")
@click.option("--last-name", help="Contact last name")
@click.option("--company", help="Company name")
@click.option("--industry", help="Company industry")
@click.option("--locality", help="Town or city")
@click.option("--email", help="Contact email")
def add_lead(first_name, last_name, company, industry, locality, email):
    """Add a lead."""
    service = LeadService()
    with SessionLocal() as session:
        try:
            created = service.create(
                session,
                obj_in={
                    "person_firstname": first_name,
                    "person_lastname": last_name,
                    "company_name": company,
                    "company_industry": industry,
                    "locality": locality,
                    "email": email,
                },
            )
        except PersistenceError as e:
            raise click.ClickException(str(e))
        lead_id = created.id

    click.echo(f"✅ Created lead {lead_id}")


if __name__ == "__main__":
    cli()
