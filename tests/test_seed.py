"""
Startup seeding and bcrypt helpers.
"""
from electrolight.auth import authenticate, hash_password, verify_password
from electrolight.seed import DEFAULT_BRANDS, DEFAULT_CATEGORIES, seed_basic_data


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("admin123")
        assert hashed != "admin123"
        assert verify_password("admin123", hashed)
        assert not verify_password("wrong", hashed)

    def test_non_bcrypt_value(self):
        assert not verify_password("admin123", "plain-text")
        assert not verify_password("admin123", None)


class TestSeedBasicData:

    def test_seeds_once(self, repo):
        seed_basic_data(repo)
        seed_basic_data(repo)

        assert len(repo.list_categories()) == len(DEFAULT_CATEGORIES)
        assert len(repo.list_brands()) == len(DEFAULT_BRANDS)
        assert authenticate(repo, "admin", "admin123") is not None

    def test_existing_categories_are_kept(self, repo):
        repo.create_category({"name": "Custom", "slug": "custom", "image_url": "/c.png"})
        seed_basic_data(repo)
        assert [c.slug for c in repo.list_categories()] == ["custom"]

    def test_removes_accessories_category(self, repo):
        repo.create_category({"name": "Accessories", "slug": "accessories", "image_url": "/a.png"})
        seed_basic_data(repo)
        assert repo.get_category_by_slug("accessories") is None
