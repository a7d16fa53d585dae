"""Film library with authors, country restrictions and users."""