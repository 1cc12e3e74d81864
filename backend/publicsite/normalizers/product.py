from publicsite.domain.content import Product


def normalize_product(product):
    return Product(
        id=str(product.id),
        title=product.title,
        description=product.description,
        price_amount=product.price_amount,
        price_currency=product.price_currency,
        thumbnail_url=product.thumbnail_url,
        product_type=product.product_type,
    )
