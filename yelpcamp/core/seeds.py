"""
Random campgrounds, for filling an empty development database
"""
from decimal import Decimal
import random
from yelpcamp.core.dtos import CampgroundRequest, ImageDetails

CITIES = [
    ("Bend", "Oregon"),
    ("Moab", "Utah"),
    ("Flagstaff", "Arizona"),
    ("Asheville", "North Carolina"),
    ("Bozeman", "Montana"),
    ("Estes Park", "Colorado"),
    ("Lake Placid", "New York"),
    ("Bar Harbor", "Maine"),
    ("Jackson", "Wyoming"),
    ("Sedona", "Arizona"),
    ("Marquette", "Michigan"),
    ("Hood River", "Oregon"),
    ("Ely", "Minnesota"),
    ("Gatlinburg", "Tennessee"),
    ("Mammoth Lakes", "California"),
]

DESCRIPTORS = [
    'Forest', 'Ancient', 'Petrified', 'Roaring', 'Cascade', 'Tumbling',
    'Silent', 'Redwood', 'Bullfrog', 'Maple', 'Misty', 'Elk', 'Grizzly',
    'Ocean', 'Sea', 'Sky', 'Dusty', 'Diamond',
]

PLACES = [
    'Flats', 'Village', 'Canyon', 'Pond', 'Group Camp', 'Horse Camp',
    'Ghost Town', 'Camp', 'Dispersed Camp', 'Backcountry', 'River', 'Creek',
    'Creekside', 'Bay', 'Spring', 'Bayshore', 'Sands', 'Mule Camp', 'Hunting',
    'Cliffs', 'Hollow',
]

DESCRIPTION = ("Lorem ipsum dolor sit amet, consectetur adipiscing elit. "
    "Quisque sit amet tellus vel nisl luctus tincidunt. Sed eu erat at urna "
    "elementum vestibulum a vel nulla.")

IMAGE_URL = "https://picsum.photos/seed/yelpcamp-%d/800/600"

def seed_requests(count, rng=None):
    """
    Generate count random CampgroundRequests
    """
    rng = rng or random.Random()
    requests = []
    for _ in range(count):
        city, state = rng.choice(CITIES)
        title = "%s %s" % (rng.choice(DESCRIPTORS), rng.choice(PLACES))
        price = Decimal(rng.randint(1000, 3000)) / 100
        image = ImageDetails(IMAGE_URL % (rng.randint(0, 1000),))
        requests.append(CampgroundRequest(title=title,
                                          location="%s, %s" % (city, state),
                                          price=price,
                                          description=DESCRIPTION,
                                          images=[image]))
    return requests
