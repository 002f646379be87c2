"""Django settings for the Shelfman test suite."""

SECRET_KEY = "shelfman-tests"

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "shelfman",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True

SHELFMAN = {
    "PRODUCT_SOURCE": "shelfman.adapters.static.StaticProductSource",
}
