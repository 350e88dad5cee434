"""End-to-end smoke flow against a running server (python run.py)."""
import uuid

import requests

BASE_URL = "http://127.0.0.1:5000"
SUFFIX = uuid.uuid4().hex[:8]


# Step 1: Register an entrepreneur looking for Python and Design
def register_entrepreneur():
    url = f"{BASE_URL}/registrations/entrepreneur"
    form = {
        "name": "Alice",
        "surname": "Martin",
        "email": f"alice-{SUFFIX}@example.com",
        "password": "hanoihue",
        "city": "Lyon",
        "projectName": "Bakery website",
        "sector": "Food",
        "desiredSkills": "Python, Design",
        "description": "Online orders for a small bakery",
        "budget": "3000",
        "deadline": "2026-12-31",
    }
    response = requests.post(url, data=form)
    print("Register Entrepreneur Response:", response.json())
    return response.json().get("id") if response.status_code == 201 else None


# Step 2: Register a freelance offering Python
def register_freelance():
    url = f"{BASE_URL}/registrations/freelance"
    payload = {
        "name": "Bob",
        "surname": "Durand",
        "email": f"bob-{SUFFIX}@example.com",
        "password": "hanoihue",
        "skills": "Python, Django",
        "yearsExperience": 4,
        "hourlyRate": 45,
        "availability": "Weekdays",
    }
    response = requests.post(url, json=payload)
    print("Register Freelance Response:", response.json())
    return response.status_code == 200


# Step 3: Login
def login(email):
    response = requests.post(f"{BASE_URL}/auth/login", json={"email": email, "password": "hanoihue"})
    print("Login Response:", response.json())
    return response.status_code == 200


# Step 4: Matches
def matches(entrepreneur_id):
    response = requests.get(f"{BASE_URL}/matches/{entrepreneur_id}")
    print("Matches Response:", response.json())


# Main Flow
if __name__ == "__main__":
    entrepreneur_id = register_entrepreneur()
    if entrepreneur_id and register_freelance():
        if login(f"alice-{SUFFIX}@example.com"):
            matches(entrepreneur_id)
        else:
            print("Login failed.")
    else:
        print("Registration failed.")
