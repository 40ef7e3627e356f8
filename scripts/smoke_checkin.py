#!/usr/bin/env python3
"""Script para probar el flujo de check-in contra un servidor en ejecución"""
import os
import sys
import time
import httpx

BASE_URL = os.getenv("CHECKIN_BASE_URL", "http://localhost:3006")


# Colores para output
class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    BLUE = '\033[94m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


def print_success(msg):
    print(f"{Colors.GREEN}✅ {msg}{Colors.RESET}")


def print_error(msg):
    print(f"{Colors.RED}❌ {msg}{Colors.RESET}")


def print_info(msg):
    print(f"{Colors.BLUE}ℹ️  {msg}{Colors.RESET}")


def check(step: str, response: httpx.Response, expected_status: int) -> dict:
    """Verificar status de una respuesta y devolver su JSON"""
    if response.status_code != expected_status:
        print_error(f"{step}: status {response.status_code} (esperado {expected_status}) - {response.text[:200]}")
        raise SystemExit(1)
    print_success(f"{step}: {response.status_code}")
    return response.json()


def main():
    print(f"\n{Colors.BOLD}{'='*70}")
    print("🧪 SMOKE TEST CHECK-IN")
    print(f"{'='*70}{Colors.RESET}\n")

    event_id = f"smoke-event-{int(time.time())}"

    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        check("Health", client.get("/health"), 200)

        ticket = check("Registrar ticket", client.post("/checkin/tickets", json={
            "eventId": event_id,
            "nftTokenId": f"nft-{event_id}",
            "ticketType": "GA",
            "expiresAt": int(time.time() * 1000) + 86_400_000,
        }), 201)
        print_info(f"Ticket: {ticket['id']}")

        result = check("Validar ticket", client.get(f"/checkin/tickets/{ticket['id']}/validate"), 200)
        if not result["valid"]:
            print_error(f"Ticket inválido: {result['message']}")
            raise SystemExit(1)

        record = check("Check-in", client.post("/checkin/check-in", json={
            "ticketId": ticket["id"],
            "userId": "smoke-user",
            "nftTokenId": ticket["nftTokenId"],
            "eventId": event_id,
            "validationMethod": "manual",
            "location": "smoke",
        }), 201)
        print_info(f"QR: {record['qrCode']}")

        check("Segundo check-in rechazado", client.post("/checkin/check-in", json={
            "ticketId": ticket["id"],
            "userId": "smoke-user",
            "nftTokenId": ticket["nftTokenId"],
            "eventId": event_id,
            "validationMethod": "manual",
        }), 400)

        stats = check("Estadísticas", client.get(f"/checkin/event/{event_id}/stats"), 200)
        print_info(f"Stats: {stats}")

    print(f"\n{Colors.BOLD}{'='*70}{Colors.RESET}\n")


if __name__ == "__main__":
    try:
        main()
    except httpx.ConnectError:
        print_error(f"Connection error - ¿Está corriendo el servidor en {BASE_URL}?")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nPrueba interrumpida por el usuario")
        sys.exit(1)
