"""
Pytest configuration and shared fixtures for the test suite.
"""
import pytest
from app import create_app, db
from models import User, Bootcamp, Course, Review
from services import user_service
from services.auth_service import sign_token


@pytest.fixture(scope='function')
def app(tmp_path):
    """Create application for testing."""
    app = create_app('testing')
    app.config.update({
        'SECRET_KEY': 'test-secret-key',
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
    })

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()

@pytest.fixture
def db_session(app):
    """Create database session."""
    with app.app_context():
        yield db.session

@pytest.fixture
def make_user(db_session):
    """Factory creating users with a hashed password of 'password123'."""
    counter = {'n': 0}

    def _make_user(role='user', name=None, email=None, password='password123'):
        counter['n'] += 1
        return user_service.create_user(
            name=name or f'{role.title()} {counter["n"]}',
            email=email or f'{role}{counter["n"]}@example.com',
            password=password,
            role=role
        )
    return _make_user

@pytest.fixture
def test_user(make_user):
    return make_user('user', name='Test User', email='test@example.com')

@pytest.fixture
def other_user(make_user):
    return make_user('user', name='Other User', email='other@example.com')

@pytest.fixture
def publisher(make_user):
    return make_user('publisher', name='Publisher', email='publisher@example.com')

@pytest.fixture
def other_publisher(make_user):
    return make_user('publisher', name='Other Publisher', email='other.publisher@example.com')

@pytest.fixture
def admin(make_user):
    return make_user('admin', name='Admin', email='admin@example.com')

@pytest.fixture
def auth_headers(app):
    """Build an Authorization header carrying a real token for a user."""
    def _auth_headers(user):
        return {'Authorization': f'Bearer {sign_token(user)}'}
    return _auth_headers

@pytest.fixture
def sample_bootcamp_data():
    """Sample bootcamp payload."""
    return {
        'name': 'Devworks Bootcamp',
        'description': 'Full stack JavaScript bootcamp in Boston',
        'website': 'https://devworks.com',
        'phone': '(111) 111-1111',
        'email': 'enroll@devworks.com',
        'address': '233 Bay State Rd Boston MA 02215',
        'careers': ['Web Development', 'UI/UX', 'Business'],
        'housing': True,
        'job_assistance': True,
    }

@pytest.fixture
def test_bootcamp(db_session, publisher):
    """Create a bootcamp owned by the publisher."""
    bootcamp = Bootcamp(
        name='Test Bootcamp',
        slug='test-bootcamp',
        description='A bootcamp used in tests',
        address='1 Main St Boston MA 02215',
        careers=['Web Development', 'Data Science'],
        latitude=42.3505,
        longitude=-71.1054,
        user_id=publisher.id
    )
    db_session.add(bootcamp)
    db_session.commit()
    return bootcamp

@pytest.fixture
def test_course(db_session, test_bootcamp, publisher):
    """Create a course in the test bootcamp."""
    course = Course(
        title='Front End Web Development',
        description='HTML, CSS and JavaScript',
        weeks='8',
        tuition=8000,
        minimum_skill='beginner',
        bootcamp_id=test_bootcamp.id,
        user_id=publisher.id
    )
    db_session.add(course)
    db_session.commit()
    return course

@pytest.fixture
def test_review(db_session, test_bootcamp, test_user):
    """Create a review of the test bootcamp by the test user."""
    review = Review(
        title='Learned a ton',
        text='Great instructors',
        rating=8,
        bootcamp_id=test_bootcamp.id,
        user_id=test_user.id
    )
    db_session.add(review)
    db_session.commit()
    return review
