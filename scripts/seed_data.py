#!/usr/bin/env python3
"""
Seed script: creates users, skills and exchange requests via the API (no direct DB).
Run with the API up:
  python scripts/seed_data.py
  python scripts/seed_data.py --users 20 --skills-per-user 3 --requests-per-user 2
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:5000/api"

SKILLS = [
    ("Music", "Guitar Lessons", "Acoustic and electric guitar for any age."),
    ("Music", "Piano Basics", "Reading sheet music and simple chord progressions."),
    ("Languages", "Spanish Conversation", "Relaxed conversation practice for intermediate learners."),
    ("Languages", "French Grammar", "Structured grammar sessions with exercises."),
    ("Programming", "Python for Beginners", "Variables, loops and writing your first scripts."),
    ("Programming", "Web Development", "HTML, CSS and a little JavaScript to build a site."),
    ("Cooking", "Baking Bread", "Sourdough starters, kneading and shaping loaves."),
    ("Fitness", "Yoga Flow", "Morning yoga routines focused on mobility."),
    ("Art", "Watercolor Painting", "Washes, layering and painting landscapes."),
    ("Photography", "Portrait Photography", "Lighting and posing for natural portraits."),
]
LEVELS = ["Beginner", "Intermediate", "Expert"]
DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
SLOTS = ["09:00-11:00", "13:00-15:00", "18:00-20:00"]


def random_skill() -> dict:
    category, title, description = random.choice(SKILLS)
    return {
        "category": category,
        "title": title,
        "description": description,
        "experienceLevel": random.choice(LEVELS),
        "availability": {
            "days": random.sample(DAYS, k=2),
            "timeSlots": random.sample(SLOTS, k=1),
        },
    }


def main():
    ap = argparse.ArgumentParser(description="Seed users, skills and requests via API")
    ap.add_argument("--users", type=int, default=10, help="Number of users to create")
    ap.add_argument("--skills-per-user", type=int, default=2, help="Skills per user")
    ap.add_argument("--requests-per-user", type=int, default=2, help="Requests each user sends")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    tokens: list[str] = []
    skill_ids: list[tuple[str, int]] = []  # (skill id, owner index)
    created_requests = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.users} users...")
        for i in range(args.users):
            creds = {"email": f"user{i + 1}@example.com", "password": "password123"}
            r = client.post(
                "/auth/register",
                json={**creds, "name": f"User {i + 1}", "phone": f"55500{i + 1:05d}"},
            )
            if r.status_code == 400:
                # Already registered on a previous run - log in instead
                r = client.post("/auth/login", json=creds)
            if r.status_code not in (200, 201):
                errors.append(f"User {creds['email']}: {r.status_code} {r.text[:80]}")
                continue
            tokens.append(r.json()["token"])

        print(f"Creating ~{len(tokens) * args.skills_per_user} skills...")
        for owner, token in enumerate(tokens):
            headers = {"Authorization": f"Bearer {token}"}
            for _ in range(args.skills_per_user):
                r = client.post("/skills", headers=headers, json=random_skill())
                if r.status_code == 201:
                    skill_ids.append((r.json()["skill"]["id"], owner))
                else:
                    errors.append(f"Skill for user {owner + 1}: {r.status_code}")

        print("Sending exchange requests...")
        for requester, token in enumerate(tokens):
            headers = {"Authorization": f"Bearer {token}"}
            candidates = [sid for sid, owner in skill_ids if owner != requester]
            for skill_id in random.sample(candidates, k=min(args.requests_per_user, len(candidates))):
                r = client.post(
                    "/requests",
                    headers=headers,
                    json={"skillId": skill_id, "message": "Happy to swap lessons!"},
                )
                if r.status_code == 201:
                    created_requests += 1
                else:
                    errors.append(f"Request from user {requester + 1}: {r.status_code} {r.text[:80]}")

    print(f"\nDone. Users: {len(tokens)}, Skills: {len(skill_ids)}, Requests: {created_requests}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
