USERS_COLLECTION_NAME = 'users'
PRODUCTS_COLLECTION_NAME = 'products'
