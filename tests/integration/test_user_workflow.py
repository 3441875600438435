"""
Integration tests for complete user workflows.
"""
from unittest.mock import patch

from extensions import db, mail
from models import Bootcamp, User

API = '/api/v1'


class TestUserWorkflow:
    """Test complete user workflows from start to finish."""

    def test_password_reset_flow(self, client):
        """Register, forget the password, reset it through the emailed link and log in again."""
        response = client.post(f'{API}/auth/register', json={
            'name': 'Forgetful', 'email': 'forgetful@example.com', 'password': 'original1'
        })
        assert response.status_code == 200

        with mail.record_messages() as outbox:
            response = client.post(f'{API}/auth/forgotpassword', json={'email': 'forgetful@example.com'})
        assert response.status_code == 200
        assert response.json == {'success': True, 'data': 'Email sent'}
        assert len(outbox) == 1

        reset_url = outbox[0].body.split()[-1]
        assert '/api/v1/auth/resetpassword/' in reset_url
        reset_path = reset_url[reset_url.index('/api/v1/'):]

        response = client.put(reset_path, json={'password': 'replaced2'})
        assert response.status_code == 200
        assert response.json['token']

        # The link only works once
        response = client.put(reset_path, json={'password': 'replaced3'})
        assert response.status_code == 400
        assert response.json['error'] == 'Invalid token'

        old = client.post(f'{API}/auth/login', json={'email': 'forgetful@example.com', 'password': 'original1'})
        assert old.status_code == 401
        new = client.post(f'{API}/auth/login', json={'email': 'forgetful@example.com', 'password': 'replaced2'})
        assert new.status_code == 200

    def test_forgot_password_email_failure(self, client, test_user):
        with patch('services.password_reset_service.send_email', side_effect=OSError('connection refused')):
            response = client.post(f'{API}/auth/forgotpassword', json={'email': test_user.email})

        assert response.status_code == 500
        assert response.json == {'success': False, 'error': 'Email could not be sent'}
        user = db.session.get(User, test_user.id)
        assert user.reset_password_token is None
        assert user.reset_password_expire is None

    def test_publisher_and_reviewers_workflow(self, client, publisher, test_user, other_user, auth_headers,
                                              sample_bootcamp_data):
        """A publisher lists a bootcamp with courses, users review it and the averages follow."""
        response = client.post(f'{API}/bootcamps', headers=auth_headers(publisher), json=sample_bootcamp_data)
        assert response.status_code == 201
        bootcamp_id = response.json['data']['id']

        for tuition in (8000, 10000):
            response = client.post(f'{API}/bootcamps/{bootcamp_id}/courses', headers=auth_headers(publisher), json={
                'title': f'Course {tuition}', 'description': 'd', 'weeks': '8',
                'tuition': tuition, 'minimum_skill': 'beginner',
            })
            assert response.status_code == 201

        for user, rating in ((test_user, 6), (other_user, 9)):
            response = client.post(f'{API}/bootcamps/{bootcamp_id}/reviews', headers=auth_headers(user), json={
                'title': 'Review', 'text': 'Text', 'rating': rating,
            })
            assert response.status_code == 201

        data = client.get(f'{API}/bootcamps/{bootcamp_id}').json['data']
        assert data['average_cost'] == 9000
        assert data['average_rating'] == 7.5
        assert len(data['courses']) == 2

        reviews = client.get(f'{API}/bootcamps/{bootcamp_id}/reviews').json
        assert reviews['count'] == 2

        response = client.get(f'{API}/bootcamps?careers[in]=UI/UX&select=name,average_cost')
        assert response.json['data'] == [{'id': bootcamp_id, 'name': 'Devworks Bootcamp', 'average_cost': 9000}]

        response = client.delete(f'{API}/bootcamps/{bootcamp_id}', headers=auth_headers(publisher))
        assert response.status_code == 200
        assert client.get(f'{API}/bootcamps/{bootcamp_id}/reviews').status_code == 404
        assert Bootcamp.query.count() == 0

    def test_admin_manages_users(self, client, admin, auth_headers):
        headers = auth_headers(admin)
        response = client.post(f'{API}/users', headers=headers, json={
            'name': 'Staff', 'email': 'staff@example.com', 'password': 'secret123'
        })
        assert response.status_code == 201
        user_id = response.json['data']['id']

        response = client.put(f'{API}/users/{user_id}', headers=headers, json={'password': 'changed123'})
        assert response.status_code == 200

        login = client.post(f'{API}/auth/login', json={'email': 'staff@example.com', 'password': 'changed123'})
        assert login.status_code == 200

        assert client.delete(f'{API}/users/{user_id}', headers=headers).status_code == 200
        assert client.get(f'{API}/users/{user_id}', headers=headers).status_code == 404
