from foodhub.restaurant_data import SITE


async def get_site_content(params):
    """Static content of the public page"""
    return SITE
