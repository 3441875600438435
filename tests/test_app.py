"""
Tests for application setup and configuration.
"""
import pytest
from app import create_app, db
from config import config, TestingConfig, ProductionConfig


class TestAppFactory:
    """Test the application factory."""

    def test_app_creation(self, app):
        """Test that the app is created successfully."""
        assert app is not None
        assert app.config['TESTING'] is True
        assert 'memory' in app.config['SQLALCHEMY_DATABASE_URI']

    def test_blueprints_registered(self, app):
        """Test that every API blueprint is registered."""
        for name in ('auth', 'bootcamps', 'courses', 'reviews', 'users'):
            assert name in app.blueprints

    def test_api_prefix(self, app):
        """Test that routes are mounted under the versioned prefix."""
        rules = {rule.rule for rule in app.url_map.iter_rules()}
        assert '/api/v1/bootcamps' in rules
        assert '/api/v1/auth/login' in rules
        assert '/api/v1/bootcamps/<bootcamp_id>/courses' in rules
        assert '/api/v1/bootcamps/radius/<zipcode>/<distance>' in rules

    def test_config_mapping(self):
        """Test the named configuration lookup."""
        assert config['testing'] is TestingConfig
        assert config['production'] is ProductionConfig
        assert ProductionConfig.JWT_COOKIE_SECURE is True


class TestCoreRoutes:
    """Test routes that are not part of a resource blueprint."""

    def test_index(self, client):
        response = client.get('/')
        assert response.status_code == 200
        assert response.json['success'] is True

    def test_unknown_route_returns_json_error(self, client):
        response = client.get('/api/v1/nothing-here')
        assert response.status_code == 404
        assert response.json['success'] is False
        assert 'error' in response.json

    def test_method_not_allowed_returns_json_error(self, client):
        response = client.patch('/api/v1/bootcamps')
        assert response.status_code == 405
        assert response.json['success'] is False
