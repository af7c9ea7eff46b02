"""
Console Demo API - Routes Package
==================================

Route Inventory:
    - greeting.py:   GET  /                (fixed greeting)
                     POST /save            (echo body text)
    - employees.py:  GET  /employee        (append + list)
                     POST /employee        (append, fixed confirmation)
                     GET  /employees       (list)
    - health.py:     GET  /health          (liveness)

Routes stay thin: read the request, call a service, shape the response.
"""
