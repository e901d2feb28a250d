"""Demo inventory served by the in-memory store and loaded by the seed script."""
from datetime import datetime, timezone


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def _img(image_id: str, url: str, alt: str, order: int = 0) -> dict:
    return {"id": image_id, "url": url, "alt": alt, "order": order, "isPrimary": order == 0}


_UNSPLASH = "https://images.unsplash.com/photo-{}?w=800&q=80"

SAMPLE_VEHICLES = [
    {
        "id": "1", "brand": "BMW", "model": "X4", "year": 2024, "price": 1078000, "mileage": 15000,
        "fuelType": "gasoline", "transmission": "automatic", "color": "Negro",
        "description": "BMW X4 en excelentes condiciones. Un solo dueño, servicio de agencia. "
                       "Interiores de piel, sistema de navegación, sensores de estacionamiento, "
                       "cámara de reversa. Garantía de agencia vigente.",
        "status": "available", "featured": True, "createdAt": _day(2024, 1, 15),
        "images": [
            _img("img1", _UNSPLASH.format("1555215695-3004980ad54e"), "BMW X4", 0),
            _img("img2", _UNSPLASH.format("1617814076367-b759c7d7e738"), "BMW X4 Interior", 1),
        ],
    },
    {
        "id": "2", "brand": "Jeep", "model": "Wrangler Unlimited", "year": 2021, "price": 850000,
        "mileage": 35000, "fuelType": "gasoline", "transmission": "automatic", "color": "Blanco",
        "description": "Jeep Wrangler Unlimited Sahara. Perfecta para aventuras todoterreno. "
                       "Techo removible, tracción 4x4, sistema de sonido premium. Muy bien cuidada.",
        "status": "available", "featured": True, "createdAt": _day(2024, 1, 10),
        "images": [_img("img3", _UNSPLASH.format("1519641471654-76ce0107ad1b"), "Jeep Wrangler")],
    },
    {
        "id": "3", "brand": "Volvo", "model": "XC90", "year": 2021, "price": 920000, "mileage": 42000,
        "fuelType": "hybrid", "transmission": "automatic", "color": "Gris",
        "description": "Volvo XC90 T8 Híbrido. El SUV más seguro del mundo. Asientos para 7 pasajeros, "
                       "sistema de sonido Bowers & Wilkins, conducción semi-autónoma Pilot Assist.",
        "status": "available", "featured": True, "createdAt": _day(2024, 1, 8),
        "images": [_img("img4", _UNSPLASH.format("1606664515524-ed2f786a0bd6"), "Volvo XC90")],
    },
    {
        "id": "4", "brand": "Lincoln", "model": "Navigator", "year": 2021, "price": 1350000,
        "mileage": 28000, "fuelType": "gasoline", "transmission": "automatic", "color": "Negro",
        "description": "Lincoln Navigator Reserve. Lujo americano en su máxima expresión. Interiores de "
                       "piel premium, sistema de entretenimiento para pasajeros traseros, suspensión adaptativa.",
        "status": "available", "featured": True, "createdAt": _day(2024, 1, 5),
        "images": [_img("img5", _UNSPLASH.format("1533473359331-0135ef1b58bf"), "Lincoln Navigator")],
    },
    {
        "id": "5", "brand": "SEAT", "model": "Arona", "year": 2023, "price": 420000, "mileage": 12000,
        "fuelType": "gasoline", "transmission": "automatic", "color": "Rojo",
        "description": "SEAT Arona Style. SUV compacto ideal para la ciudad. Excelente rendimiento de "
                       "combustible, pantalla táctil, Android Auto y Apple CarPlay.",
        "status": "available", "featured": True, "createdAt": _day(2024, 1, 3),
        "images": [_img("img6", _UNSPLASH.format("1552519507-da3b142c6e3d"), "SEAT Arona")],
    },
    {
        "id": "6", "brand": "Chevrolet", "model": "Suburban", "year": 2018, "price": 680000,
        "mileage": 75000, "fuelType": "gasoline", "transmission": "automatic", "color": "Plata",
        "description": "Chevrolet Suburban LT. El SUV familiar por excelencia. Amplio espacio para 8 "
                       "pasajeros, capacidad de remolque, aire acondicionado tri-zona.",
        "status": "available", "featured": False, "createdAt": _day(2024, 1, 1),
        "images": [_img("img7", _UNSPLASH.format("1494976388531-d1058494cdd8"), "Chevrolet Suburban")],
    },
    {
        "id": "7", "brand": "Honda", "model": "CR-V", "year": 2022, "price": 520000, "mileage": 25000,
        "fuelType": "gasoline", "transmission": "automatic", "color": "Azul",
        "description": "Honda CR-V Touring. SUV compacto con la confiabilidad Honda. Honda Sensing de "
                       "serie, AWD, interior espacioso y versátil.",
        "status": "reserved", "featured": False, "createdAt": _day(2023, 12, 28),
        "images": [_img("img8", _UNSPLASH.format("1568605117036-5fe5e7bab0b7"), "Honda CR-V")],
    },
    {
        "id": "8", "brand": "Toyota", "model": "Camry", "year": 2023, "price": 580000, "mileage": 18000,
        "fuelType": "hybrid", "transmission": "automatic", "color": "Blanco",
        "description": "Toyota Camry XLE Hybrid. Sedán ejecutivo con tecnología híbrida. Excelente "
                       "rendimiento, interiores de piel, sistema JBL premium.",
        "status": "available", "featured": False, "createdAt": _day(2023, 12, 25),
        "images": [_img("img9", _UNSPLASH.format("1621007947382-bb3c3994e3fb"), "Toyota Camry")],
    },
    {
        "id": "9", "brand": "Mercedes-Benz", "model": "GLE 450", "year": 2022, "price": 1250000,
        "mileage": 22000, "fuelType": "gasoline", "transmission": "automatic", "color": "Blanco",
        "description": "Mercedes-Benz GLE 450 4MATIC. Lujo alemán con tecnología de punta. Sistema MBUX, "
                       "conducción semi-autónoma, interiores de piel Nappa.",
        "status": "available", "featured": True, "createdAt": _day(2023, 12, 20),
        "images": [_img("img10", _UNSPLASH.format("1618843479313-40f8afb4b4d8"), "Mercedes-Benz GLE")],
    },
]

SAMPLE_SITE_IMAGES = [
    {
        "section": "hero",
        "url": "https://images.unsplash.com/photo-1603584173870-7f23fdae1b7a?w=1200&q=80",
        "title": "Banner Principal",
        "alt": "Showroom de autos AMSA",
        "order": 0,
    },
    {
        "section": "about",
        "url": "https://images.unsplash.com/photo-1560958089-b8a1929cea89?w=800&q=80",
        "title": "Nuestro Showroom",
        "alt": "Interior del showroom AMSA",
        "order": 0,
    },
]
