"""
Файл для локального тестирования работоспособности сервера.
Сервер должен быть запущен: python -m sudokuwiki
"""

import requests

BASE_URL = "http://localhost:8080"
PAGE = "SmokeTest"


def main():
    print(f"Saving page {PAGE} at {BASE_URL}")

    try:
        r = requests.post(f"{BASE_URL}/save/{PAGE}",
                          data={"body": "Smoke test page"},
                          allow_redirects=False)
        r.raise_for_status()
        print(f"[SAVE]: {r.status_code} -> {r.headers.get('location')}")

        # Запись идёт в файл с именем в нижнем регистре
        r = requests.get(f"{BASE_URL}/view/{PAGE.lower()}")
        r.raise_for_status()
        print(f"[VIEW]: {r.status_code}, body found: {'Smoke test page' in r.text}")

        r = requests.get(f"{BASE_URL}/all/")
        r.raise_for_status()
        print(f"[ALL]: {r.text.count('/view/')} pages")

        r = requests.get(f"{BASE_URL}/sudoku/all")
        print(f"[SUDOKU]: {r.status_code}, {r.text.count('/sudoku/') - 1} boards")

        print("\n--- END ---")

    except requests.RequestException as e:
        print(f"\nCritical error: {e}")


if __name__ == "__main__":
    main()
