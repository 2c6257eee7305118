from datetime import datetime
import os

import httpx
from dotenv import load_dotenv


def main() -> None:
    load_dotenv()

    base_url = os.getenv("USER_SERVICE_URL", "http://localhost:8000")
    user_input = {
        "first_name": "Kemal",
        "last_name": "Atdayew",
        "phone_number": "+993232323232",
        "password": "K8asdasdasd!",
    }

    with httpx.Client(base_url=base_url, timeout=10.0) as client:
        response = client.post("/api/users", json=user_input)
        if response.is_error:
            raise SystemExit(f"Failed to create user: {response.status_code} {response.text}")
        created = response.json()

    registration_date = datetime.fromisoformat(created["registration_date"])
    print(
        "User created:\n"
        f"  ID: {created['id']}\n"
        f"  First Name: {created['first_name']}\n"
        f"  Last Name: {created['last_name']}\n"
        f"  Phone Number: {created['phone_number']}\n"
        f"  Blocked: {created['blocked']}\n"
        f"  Registration Date: {registration_date:%Y-%m-%d %H:%M:%S}"
    )


if __name__ == "__main__":
    main()
