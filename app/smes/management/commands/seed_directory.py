import click
from flask.cli import with_appcontext
from external.database import db
from app.categories.models import Category
from app.users.models import User
from app.smes.models import Sme, SmeImage, SmeCategory
from app.products.models import Product, ProductImage
from app.smes.management.data import CATEGORIES, LISTINGS


@click.command("seed-directory")
@click.option(
    "--force",
    is_flag=True,
    help="Delete existing users, listings, products and categories first",
)
@click.option(
    "--password",
    default="lokapedia123",
    show_default=True,
    help="Password given to every seeded owner account",
)
@with_appcontext
def seed_directory(force, password):
    """Populate the directory with demo categories, listings and products."""

    if force:
        click.echo("Deleting existing directory data...")
        # ORM deletes so relationship cascades run
        for model in (Sme, User, Category):
            for row in model.query.all():
                db.session.delete(row)
        db.session.commit()
    elif Category.query.first():
        click.echo("Categories already exist, skipping. Use --force to reseed.")
        return

    categories = {}
    for cat_data in CATEGORIES:
        category = Category(**cat_data)
        db.session.add(category)
        categories[cat_data["name"]] = category
    db.session.flush()  # Get the IDs
    click.echo(f"  Created {len(categories)} categories")

    for listing in LISTINGS:
        owner = User(**listing["owner"])
        owner.set_password(password)
        db.session.add(owner)
        db.session.flush()

        sme = Sme(user_id=owner.id, **listing["sme"])
        sme.images = [SmeImage(is_featured=True, **listing["image"])]
        sme.categories = [
            SmeCategory(category_id=categories[name].id)
            for name in listing["categories"]
        ]
        db.session.add(sme)
        db.session.flush()

        for product_data in listing["products"]:
            db.session.add(
                Product(
                    sme_id=sme.id,
                    images=[
                        ProductImage(
                            url="/placeholder.jpg", alt=product_data["name"]
                        )
                    ],
                    **product_data,
                )
            )

        click.echo(
            f"  Created: {sme.name} ({len(listing['products'])} products, owner {owner.email})"
        )

    db.session.commit()
    click.echo("Directory seeded.")
