"""Run with: python main.py examples/smoke.py (http is injected by the runner)."""

response = http.get("https://api.example.com/v1/health")
print(response.status_code, response.json())

response = http.request("POST", "https://api.example.com/v1/orders", data="<order><id>1</id></order>")
print(response.status_code, response.json())

future = http.async_request("GET", "https://api.example.com/v1/orders")
print(future.result().json())
