#!/usr/bin/env python3
"""
Seed script for the Bootcamp Directory database.
This script populates the database with a small sample data set.
"""

import sys
from app import create_app
from extensions import db
from models import User, Bootcamp, Course, Review
from services import bootcamp_service, course_service, review_service, user_service

SAMPLE_USERS = [
    {"name": "Admin Account", "email": "admin@gmail.com", "password": "123456", "role": "admin"},
    {"name": "Publisher Account", "email": "publisher@gmail.com", "password": "123456", "role": "publisher"},
    {"name": "John Doe", "email": "john@gmail.com", "password": "123456", "role": "user"},
    {"name": "Sara Kensing", "email": "sara@gmail.com", "password": "123456", "role": "user"},
]

SAMPLE_BOOTCAMPS = [
    {
        "name": "Devworks Bootcamp",
        "description": "Devworks is a full stack JavaScript Bootcamp located in the heart of Boston that focuses on the technologies you need to get a high paying job as a web developer",
        "website": "https://devworks.com",
        "phone": "(111) 111-1111",
        "email": "enroll@devworks.com",
        "address": "233 Bay State Rd Boston MA 02215",
        "careers": ["Web Development", "UI/UX", "Business"],
        "housing": True,
        "job_assistance": True,
        "job_guarantee": False,
        "accept_gi": True,
        "courses": [
            {"title": "Front End Web Development", "description": "This course will provide you with all of the essentials to become a successful frontend web developer.", "weeks": "8", "tuition": 8000, "minimum_skill": "beginner", "scholarship_available": True},
            {"title": "Full Stack Web Development", "description": "In this course you will learn full stack web development, first learning all about the frontend with HTML/CSS/JS/Vue and then the backend with Node.js/Express/MongoDB", "weeks": "12", "tuition": 10000, "minimum_skill": "intermediate"},
        ],
    },
    {
        "name": "ModernTech Bootcamp",
        "description": "ModernTech has one goal, and that is to make you a rockstar developer and/or designer with a six figure salary.",
        "website": "https://moderntech.com",
        "phone": "(222) 222-2222",
        "email": "enroll@moderntech.com",
        "address": "220 Pawtucket St, Lowell, MA 01854",
        "careers": ["Web Development", "UI/UX", "Mobile Development"],
        "housing": False,
        "job_assistance": True,
        "job_guarantee": False,
        "accept_gi": True,
        "courses": [
            {"title": "UI/UX", "description": "In this course you will learn to create beautiful interfaces.", "weeks": "12", "tuition": 10000, "minimum_skill": "intermediate"},
            {"title": "Web Design & Development", "description": "Get started building websites and web apps with HTML/CSS/JavaScript/PHP.", "weeks": "10", "tuition": 12000, "minimum_skill": "beginner", "scholarship_available": True},
        ],
    },
    {
        "name": "Codemasters",
        "description": "Is coding your passion? Codemasters will give you the skills and the tools to become the best developer possible.",
        "website": "https://codemasters.com",
        "phone": "(333) 333-3333",
        "email": "enroll@codemasters.com",
        "address": "85 South Prospect Street Burlington VT 05405",
        "careers": ["Web Development", "Data Science", "Business"],
        "housing": False,
        "job_assistance": False,
        "job_guarantee": False,
        "accept_gi": False,
        "courses": [
            {"title": "Data Science Program", "description": "In this course you will learn Python for data science, machine learning and big data tools.", "weeks": "10", "tuition": 12000, "minimum_skill": "beginner"},
        ],
    },
]

SAMPLE_REVIEWS = [
    {"bootcamp": "Devworks Bootcamp", "user": "john@gmail.com", "title": "Learned a ton!", "text": "I learned a lot at this bootcamp and would recommend it.", "rating": 8},
    {"bootcamp": "Devworks Bootcamp", "user": "sara@gmail.com", "title": "Great bootcamp", "text": "Great instructors and a real focus on getting hired.", "rating": 10},
    {"bootcamp": "ModernTech Bootcamp", "user": "john@gmail.com", "title": "Got me a developer job", "text": "The job assistance was worth it.", "rating": 7},
]

def seed_sample_data():
    """Seed the database with sample users, bootcamps, courses and reviews."""
    print("🌱 Starting database seeding...")

    app = create_app()

    with app.app_context():
        try:
            db.create_all()
            print("✅ Database tables created/verified")

            users = {}
            for data in SAMPLE_USERS:
                user = User.query.filter_by(email=data["email"]).first()
                if user is None:
                    user = user_service.create_user(**data)
                users[user.email] = user
            publisher = users["publisher@gmail.com"]

            bootcamps = {}
            for data in SAMPLE_BOOTCAMPS:
                data = dict(data)
                courses = data.pop("courses")
                bootcamp = Bootcamp.query.filter_by(name=data["name"]).first()
                if bootcamp is None:
                    bootcamp = bootcamp_service.create_bootcamp(data, publisher)
                    for course in courses:
                        course_service.create_course(bootcamp, course, publisher)
                bootcamps[bootcamp.name] = bootcamp

            for data in SAMPLE_REVIEWS:
                bootcamp = bootcamps[data["bootcamp"]]
                user = users[data["user"]]
                if Review.query.filter_by(bootcamp_id=bootcamp.id, user_id=user.id).first() is None:
                    review_service.create_review(bootcamp, data, user)

            print("✅ Seeding completed successfully!")
            print(f"📊 Users: {User.query.count()}, bootcamps: {Bootcamp.query.count()}, "
                  f"courses: {Course.query.count()}, reviews: {Review.query.count()}")

        except Exception as e:
            print(f"❌ Error during seeding: {e}")
            db.session.rollback()
            sys.exit(1)

def clear_data():
    """Delete all rows from every table."""
    app = create_app()

    with app.app_context():
        try:
            for model in (Review, Course, Bootcamp, User):
                count = model.query.delete()
                print(f"🗑️  Cleared {count} rows from {model.__tablename__}")
            db.session.commit()

        except Exception as e:
            print(f"❌ Error clearing data: {e}")
            db.session.rollback()
            sys.exit(1)

def main():
    """Main function to handle command line arguments."""
    if len(sys.argv) > 1:
        if sys.argv[1] == '--clear':
            print("🗑️  Clearing data...")
            clear_data()
            return
        elif sys.argv[1] == '--help' or sys.argv[1] == '-h':
            print("Bootcamp Directory Database Seeder")
            print("Usage:")
            print("  python seed.py          - Seed sample data")
            print("  python seed.py --clear  - Delete all data")
            print("  python seed.py --help   - Show this help message")
            return
        else:
            print(f"❌ Unknown argument: {sys.argv[1]}")
            print("Use 'python seed.py --help' for usage information")
            sys.exit(1)

    # Default action: seed the database
    seed_sample_data()

if __name__ == '__main__':
    main()
