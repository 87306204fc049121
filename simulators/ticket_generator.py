import argparse
import json
import os
import urllib.request


def post_json(url: str, payload: dict, email: str, role: str):
    data = json.dumps(payload).encode("utf-8")
    req = urllib.request.Request(
        url,
        data=data,
        headers={
            "Content-Type": "application/json",
            "X-User-Email": email,
            "X-User-Role": role,
        },
        method="POST",
    )
    with urllib.request.urlopen(req, timeout=10) as resp:
        body = resp.read().decode("utf-8")
        return resp.status, body


def main():
    p = argparse.ArgumentParser(description="Submit a sample helpdesk ticket")
    p.add_argument("--base-url", default=os.getenv("HELPDESK_BASE_URL", "http://localhost:8000"))
    p.add_argument("--email", default=os.getenv("HELPDESK_USER_EMAIL", "client@company.com"))
    p.add_argument("--role", default="client", choices=["client", "it-executive"])
    p.add_argument("--title", default="Printer on 3rd floor is jamming")
    p.add_argument("--category", default="Printer")
    p.add_argument("--priority", default="medium", choices=["low", "medium", "high", "urgent"])
    args = p.parse_args()

    payload = {
        "title": args.title,
        "description": "Every print job stops after the first page with a paper jam warning.",
        "category": args.category,
        "priority": args.priority,
    }

    status, body = post_json(f"{args.base_url}/tickets", payload, args.email, args.role)
    print(status)
    print(body)


if __name__ == "__main__":
    main()
