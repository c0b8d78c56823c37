from fastapi.testclient import TestClient
from app.main import app

with TestClient(app) as client:
    print('ROOT:')
    print(client.get('/').json())

    print('\nHEALTH:')
    print(client.get('/health').json())

    print('\nSTORE HEALTH:')
    try:
        resp = client.get('/health/store')
        print(resp.status_code)
        try:
            print(resp.json())
        except Exception:
            print(resp.text)
    except Exception as e:
        print('Store call raised exception:', e)

    print('\nALERTS:')
    print([(a['id'], a['status']) for a in client.get('/api/alerts').json()])
