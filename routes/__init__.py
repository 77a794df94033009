# routes – HTTP-Schnittstelle
