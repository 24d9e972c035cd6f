# Restaurant menu data (prices in KSh)
MENU_ITEMS = [
    # Starters
    {"id": 1, "name": "Samosas", "category": "starters", "price": 250,
     "description": "Golden crispy pastries filled with aromatic spiced minced meat or fresh vegetables, served with mint and tamarind chutney",
     "tags": ["Popular", "Traditional"], "spicy": True, "vegetarian": False},
    {"id": 2, "name": "Kachumbari", "category": "starters", "price": 180,
     "description": "Refreshing traditional Kenyan salad with diced tomatoes, onions, fresh coriander, and tangy lime dressing",
     "tags": ["Vegetarian", "Fresh"], "spicy": False, "vegetarian": True},
    {"id": 3, "name": "Bhajia", "category": "starters", "price": 220,
     "description": "Crispy gram flour fritters with tender spiced potatoes, served with sweet and sour tamarind chutney",
     "tags": ["Vegetarian", "Spicy"], "spicy": True, "vegetarian": True},
    {"id": 4, "name": "Mutura", "category": "starters", "price": 320,
     "description": "Traditional Kenyan sausage made with beef, goat meat, and spices, grilled to perfection and served with kachumbari",
     "tags": ["Traditional", "Popular"], "spicy": True, "vegetarian": False},

    # Mains
    {"id": 5, "name": "Nyama Choma", "category": "mains", "price": 850,
     "description": "Tender grilled goat meat marinated in traditional spices, served with fresh kachumbari and warm ugali",
     "tags": ["Popular", "Traditional"], "spicy": False, "vegetarian": False},
    {"id": 6, "name": "Pilau", "category": "mains", "price": 650,
     "description": "Fragrant basmati rice cooked with aromatic spices, tender beef or chicken, and caramelized onions",
     "tags": ["Traditional", "Popular"], "spicy": True, "vegetarian": False},
    {"id": 7, "name": "Ugali & Sukuma Wiki", "category": "mains", "price": 450,
     "description": "Kenya's beloved staple - smooth maize flour ugali paired with sautéed collard greens in garlic and onions",
     "tags": ["Traditional", "Vegetarian"], "spicy": False, "vegetarian": True},
    {"id": 8, "name": "Matoke", "category": "mains", "price": 520,
     "description": "Green bananas slow-cooked in rich tomato sauce with beef, onions, and traditional Kenyan spices",
     "tags": ["Traditional", "Comfort Food"], "spicy": False, "vegetarian": False},
    {"id": 9, "name": "Githeri", "category": "mains", "price": 380,
     "description": "Hearty mix of boiled maize and beans, simmered with vegetables, tomatoes, and aromatic spices",
     "tags": ["Traditional", "Vegetarian"], "spicy": False, "vegetarian": True},

    # Drinks
    {"id": 10, "name": "Dawa Cocktail", "category": "drinks", "price": 550,
     "description": "Kenya's signature cocktail with premium vodka, natural honey, fresh lime juice, and brown sugar",
     "tags": ["Popular", "Signature"], "spicy": False, "vegetarian": True},
    {"id": 11, "name": "Tusker Lager", "category": "drinks", "price": 350,
     "description": "Kenya's iconic premium lager beer, crisp and refreshing, served ice-cold",
     "tags": ["Popular", "Local"], "spicy": False, "vegetarian": True},
    {"id": 12, "name": "Kenyan Chai", "category": "drinks", "price": 180,
     "description": "Traditional spiced tea brewed with fresh milk, cardamom, cinnamon, and ginger",
     "tags": ["Traditional", "Hot"], "spicy": True, "vegetarian": True},
    {"id": 13, "name": "Tamarind Juice", "category": "drinks", "price": 250,
     "description": "Refreshing sweet and tangy drink made from fresh tamarind pulp, perfectly chilled",
     "tags": ["Fresh", "Traditional"], "spicy": False, "vegetarian": True},
    {"id": 14, "name": "Passion Fruit Juice", "category": "drinks", "price": 280,
     "description": "Fresh tropical passion fruit juice, naturally sweet with a delightful aromatic flavor",
     "tags": ["Fresh", "Tropical"], "spicy": False, "vegetarian": True},

    # Desserts
    {"id": 15, "name": "Mandazi", "category": "desserts", "price": 200,
     "description": "Sweet fried doughnuts spiced with cardamom and coconut, perfect with Kenyan chai or coffee",
     "tags": ["Traditional", "Sweet"], "spicy": False, "vegetarian": True},
    {"id": 16, "name": "Coconut Rice Pudding", "category": "desserts", "price": 320,
     "description": "Creamy rice pudding cooked in coconut milk, sweetened with brown sugar and topped with toasted coconut flakes",
     "tags": ["Creamy", "Tropical"], "spicy": False, "vegetarian": True},
    {"id": 17, "name": "Tropical Fruit Salad", "category": "desserts", "price": 380,
     "description": "Fresh seasonal tropical fruits including mangoes, pineapples, passion fruit, and papaya with lime zest",
     "tags": ["Fresh", "Healthy"], "spicy": False, "vegetarian": True},
]

MENU_CATEGORIES = [
    {"id": "all", "name": "All"},
    {"id": "starters", "name": "Starters"},
    {"id": "mains", "name": "Main Courses"},
    {"id": "drinks", "name": "Drinks"},
    {"id": "desserts", "name": "Desserts"},
]

# Bookable reservation times
TIME_SLOTS = [
    "11:00", "11:30", "12:00", "12:30", "13:00", "13:30", "14:00",
    "18:00", "18:30", "19:00", "19:30", "20:00", "20:30", "21:00",
]
DEFAULT_TIME = "12:00"
PAYMENT_OPTIONS = ["pay_now", "pay_later"]
RESERVATION_STATUSES = ["pending", "confirmed", "cancelled"]

DIETARY_OPTIONS = [
    "Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Halal",
    "Kosher", "No Nuts", "No Shellfish", "Keto", "Low Sodium",
]

DEFAULT_NOTIFICATION_SETTINGS = {
    "email_notifications": True,
    "sms_notifications": False,
    "reservation_reminders": True,
    "marketing_emails": False,
}

FEATURED_REVIEWS = [
    {"name": "James Mwangi", "rating": 5, "avatar": "JM",
     "review": "The Nyama Choma at FoodHub is the best I've ever had! Perfectly grilled with amazing flavor. The service was excellent too."},
    {"name": "Sarah Njoroge", "rating": 4, "avatar": "SN",
     "review": "I ordered the Pilau for delivery and it arrived hot and fresh. The portion was generous and tasted just like my grandmother makes it!"},
    {"name": "David Kimani", "rating": 5, "avatar": "DK",
     "review": "The atmosphere at FoodHub is wonderful. We celebrated my wife's birthday there and the staff went above and beyond to make it special."},
    {"name": "Grace Wanjiku", "rating": 5, "avatar": "GW",
     "review": "The Githeri here reminds me of home! Perfectly cooked and seasoned. The staff is so friendly and the prices are very reasonable."},
    {"name": "Peter Ochieng", "rating": 4, "avatar": "PO",
     "review": "I tried the Mutura for the first time and it was incredible! The spice level was perfect and the portion size was generous."},
    {"name": "Mary Akinyi", "rating": 5, "avatar": "MA",
     "review": "Best traditional Kenyan food in town! The Ugali and Sukuma Wiki combination is divine. Definitely coming back with family!"},
]

SITE = {
    "brand": "FoodHub",
    "navigation": [
        {"name": "Home", "href": "#home"},
        {"name": "Menu", "href": "#menu"},
        {"name": "Gallery", "href": "#gallery"},
        {"name": "Reservations", "href": "#reservations"},
        {"name": "Reviews", "href": "#reviews"},
        {"name": "Contact", "href": "#contact"},
    ],
    "hero": {
        "title": "Experience Authentic Kenyan Flavors",
        "subtitle": "Traditional recipes with a modern twist",
        "image": "/assets/hero-kenyan-food.jpg",
        "actions": [
            {"label": "Book a Table", "target": "#reservations"},
            {"label": "View Menu", "target": "#menu"},
        ],
    },
    "story": {
        "title": "Our Story",
        "founded": 2010,
        "paragraphs": [
            "Founded in 2010, FoodHub brings the rich culinary heritage of Kenya to Nairobi's "
            "vibrant food scene. Our chefs combine traditional techniques with fresh, locally-sourced "
            "ingredients to create unforgettable dining experiences.",
            "From our famous Nyama Choma to our signature Ugali dishes, every bite tells a "
            "story of Kenyan culture and hospitality.",
        ],
        "image": {"src": "/assets/restaurant-interior.jpg", "alt": "Kenyan cuisine"},
    },
    "gallery": [
        {"src": "/assets/hero-kenyan-food.jpg", "alt": "Kenyan grilled meat platter"},
        {"src": "/assets/samosas.jpg", "alt": "Traditional samosas"},
        {"src": "/assets/ugali-sukuma.jpg", "alt": "Ugali with sukuma wiki"},
        {"src": "/assets/restaurant-interior.jpg", "alt": "Restaurant interior"},
        {"src": "/assets/hero-kenyan-food.jpg", "alt": "Nyama choma presentation"},
        {"src": "/assets/samosas.jpg", "alt": "Food presentation"},
    ],
    "contact": {
        "address": "123 Moi Avenue, Nairobi CBD, Kenya",
        "phone": "0741 043 078",
        "email": "info@foodhub.co.ke",
        "opening_hours": {
            "weekdays": "Monday - Friday: 11:00 AM - 10:00 PM",
            "weekends": "Saturday - Sunday: 10:00 AM - 11:00 PM",
        },
        "newsletter": "Stay updated with our latest offers, events, and menu additions",
    },
    "footer": {
        "brand": "FoodHub",
        "tagline": "Authentic Kenyan Cuisine",
        "copyright": "© 2023 FoodHub. All rights reserved.",
        "links": ["Privacy Policy", "Terms of Service"],
    },
}

# In-memory storage
# Format: {session_id: serialized cart}
CART_STORAGE = {}
NEWSLETTER_SUBSCRIBERS = set()
# Format: {user_id: {notification_id, ...}}
NOTIFICATION_READS = {}
# Format: {user_id: settings}
NOTIFICATION_SETTINGS = {}
