import random
import sys

import requests

TITLES = [
    "Set up CI pipeline",
    "Write onboarding docs",
    "Add story listing page",
    "Fix login redirect",
    "Estimate backlog",
]

def create_story(base_url, title):
    url = f"http://{base_url}/stories"
    payload = {
        "title": title,
        "effort": random.choice([None, 1, 2, 3, 5, 8]),
        "done": random.random() < 0.3,
    }

    try:
        response = requests.post(url, json=payload)
        response.raise_for_status()
        print(f"✅ Created story: {title}")
    except requests.HTTPError as err:
        print(f"❌ Failed to create story {title}: {err} - {response.text}")

def list_stories(base_url):
    response = requests.get(f"http://{base_url}/stories")
    response.raise_for_status()
    return response.json()

def main():
    if len(sys.argv) < 2:
        print("Usage: python populate.py <host:port>")
        sys.exit(1)

    base_url = sys.argv[1]

    for title in TITLES:
        create_story(base_url, title)

    stories = list_stories(base_url)
    print(f"{len(stories)} stories stored")

if __name__ == "__main__":
    main()
