# electrolight/seed.py
"""
Baseline data created at startup: the admin account, the default category
list and the default brand list. Products, accessories and the rest arrive
through the admin API or scripts/load_catalog.py.
"""
import os
import logging

from dotenv import load_dotenv

from .auth import hash_password

load_dotenv()

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@electrolight.com")

_IMG = "/assets/generated_images"

DEFAULT_CATEGORIES = [
    ("Bamboo", "bamboo", f"{_IMG}/Electrical_conduit_system_5cd4a390.png"),
    ("Baseboard Heaters", "baseboard", f"{_IMG}/Electric_baseboard_heater_ecae6e6c.png"),
    ("Construction", "construction", f"{_IMG}/Construction_electrical_tools_a5330c95.png"),
    ("Driver", "driver", f"{_IMG}/Electrical_motor_driver_e5e72683.png"),
    ("Extension Rings", "extension-rings", f"{_IMG}/Electrical_extension_rings_db1d0bae.png"),
    ("Gangable Boxes", "gangable-boxes", f"{_IMG}/Gangable_electrical_boxes_16e94c10.png"),
    ("GI Wire", "gi-wire", f"{_IMG}/Electrical_wire_products_a2ddbf86.png"),
    ("Ground Plate", "ground-plate", f"{_IMG}/Electrical_ground_plate_a2a5a263.png"),
    ("Light", "light", f"{_IMG}/LED_lighting_fixtures_733f3606.png"),
    ("Metal Box", "metal-box", f"{_IMG}/Metal_electrical_box_8aaad2e8.png"),
    ("Metal Plates", "metal-plates", f"{_IMG}/Metal_electrical_plates_276ba39c.png"),
    ("Milk Carton", "milk-carton", f"{_IMG}/Electrical_outlet_plates_c156e9f7.png"),
    ("Octagonal Box", "octagonal-box", f"{_IMG}/Octagonal_electrical_box_69767a40.png"),
    ("Plastic Box", "plastic-box", f"{_IMG}/Plastic_electrical_box_3c998bd5.png"),
    ("Pot Light", "pot-light", f"{_IMG}/Recessed_pot_light_feee68af.png"),
    ("Puck Light", "puck-light", f"{_IMG}/LED_puck_lights_0a5a3eae.png"),
    ("PVC Pipe", "pvc-pipe", f"{_IMG}/PVC_electrical_pipes_c72db40b.png"),
    ("Smoke Alarm", "smoke-alarm", f"{_IMG}/Smoke_alarm_detector_2b0e0ae0.png"),
]

DEFAULT_BRANDS = [
    ("King Electric", "Premium electrical heating solutions", "https://www.king-electric.com"),
    ("Schneider Electric", "Global leader in energy management", "https://www.se.com"),
    ("Leviton", "Electrical wiring devices and lighting controls", "https://www.leviton.com"),
    ("Hubbell", "Electrical and electronic products", "https://www.hubbell.com"),
    ("Eaton", "Power management solutions", "https://www.eaton.com"),
    ("Legrand", "Electrical and digital building infrastructure", "https://www.legrand.com"),
]


def seed_admin(repository, username=ADMIN_USERNAME, password=ADMIN_PASSWORD, email=ADMIN_EMAIL) -> bool:
    if repository.get_admin_by_username(username) is not None:
        return False
    repository.create_admin({
        "username": username,
        "password": hash_password(password),
        "email": email,
        "is_active": True,
    })
    logging.info(f"✅ Admin user '{username}' seeded")
    return True


def seed_categories(repository) -> int:
    if repository.count_categories() > 0:
        return 0
    for name, slug, image_url in DEFAULT_CATEGORIES:
        repository.create_category({"name": name, "slug": slug, "image_url": image_url})
    logging.info(f"✅ {len(DEFAULT_CATEGORIES)} categories seeded")
    return len(DEFAULT_CATEGORIES)


def seed_brands(repository) -> int:
    if repository.count_brands() > 0:
        return 0
    for name, description, website in DEFAULT_BRANDS:
        repository.create_brand({"name": name, "description": description, "website": website})
    logging.info(f"✅ {len(DEFAULT_BRANDS)} brands seeded")
    return len(DEFAULT_BRANDS)


def drop_accessories_category(repository) -> bool:
    # accessories live in their own table, never as a category
    stray = repository.get_category_by_slug("accessories")
    if stray is None:
        return False
    repository.delete_category(stray.id)
    logging.info("✅ Removed 'accessories' category")
    return True


def seed_basic_data(repository) -> None:
    seed_admin(repository)
    seed_categories(repository)
    drop_accessories_category(repository)
    seed_brands(repository)
