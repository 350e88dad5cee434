from flask_cors import CORS
from skillbridge import create_app
import os
from skillbridge.config import Config

# Create Flask app instance
app = create_app()

# Dynamically configure CORS
CORS(app, resources={
    r"/*": {
        "origins": Config.CORS_ORIGINS,
        "methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type"],
    }
})

# Test AWS S3 connection when documents go to S3
if Config.STORAGE_BACKEND == 's3':
    print("[INFO] Testing AWS S3 connection...")
    import boto3
    from botocore.exceptions import BotoCoreError, ClientError
    try:
        s3_client = boto3.client(
            's3',
            aws_access_key_id=Config.AWS_ACCESS_KEY,
            aws_secret_access_key=Config.AWS_SECRET_KEY,
            region_name=Config.AWS_REGION
        )
        s3_client.head_bucket(Bucket=Config.AWS_BUCKET_NAME)
        print(f"[DEBUG] AWS S3 connection successful. Bucket: {Config.AWS_BUCKET_NAME}")
    except (BotoCoreError, ClientError) as e:
        print("[ERROR] AWS S3 connection failed:", e)

# Log the environment and allowed CORS origins
print(f"[INFO] Running in {'production' if os.getenv('FLASK_ENV') == 'production' else 'development'} mode")
print(f"[INFO] Allowed CORS Origins: {Config.CORS_ORIGINS}")

if __name__ == '__main__':
    debug_mode = Config.DEBUG
    print(f"[INFO] Debug mode is {'on' if debug_mode else 'off'}")
    app.run(debug=debug_mode, host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
