"""Fixed demo catalog loaded into an empty database at startup."""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Gift, Testimonial

logger = logging.getLogger(__name__)

GIFTS: list[dict[str, Any]] = [
    {
        "title": "Personalized Star Map Necklace",
        "description": "Custom constellation map showing the stars on your special date, elegantly engraved on a sterling silver pendant",
        "price": 89.99,
        "category": "jewelry",
        "occasion": "anniversary",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1515562141207-7a88fb7ce338",
        "affiliate_url": "https://www.etsy.com/listing/star-map-necklace?click_key=affiliate",
        "retailer": "Etsy",
        "delivery_days": 5,
    },
    {
        "title": "Birthstone Heart Bracelet",
        "description": "Delicate gold bracelet featuring her birthstone in a heart setting",
        "price": 74.99,
        "category": "jewelry",
        "occasion": "birthday",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1573408301185-9146fe634ad0",
        "affiliate_url": "https://www.amazon.com/dp/B08XYZ123?tag=giftgenius-20",
        "retailer": "Amazon",
        "delivery_days": 2,
    },
    {
        "title": "Infinity Love Knot Earrings",
        "description": "Sterling silver infinity knot earrings symbolizing eternal love",
        "price": 59.99,
        "category": "jewelry",
        "occasion": "valentine",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1535632066927-ab7c9ab60908",
        "affiliate_url": "https://www.bluenile.com/earrings/infinity-knot?source=affiliate",
        "retailer": "Blue Nile",
        "delivery_days": 3,
    },
    {
        "title": "Custom Coordinates Bracelet",
        "description": "Leather bracelet with coordinates of where you first met",
        "price": 45.99,
        "category": "jewelry",
        "occasion": "just-because",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1611652022419-a9419f74343d",
        "affiliate_url": "https://www.uncommongoods.com/product/coordinates-bracelet?source=affiliate",
        "retailer": "Uncommon Goods",
        "delivery_days": 4,
    },
    {
        "title": "Couples Spa Retreat Day",
        "description": "Full day spa package including couples massage, facial treatments, and private hot tub access",
        "price": 349.99,
        "category": "experiences",
        "occasion": "anniversary",
        "relationship_stage": "married",
        "image_url": "https://images.unsplash.com/photo-1544161515-4ab6ce6db874",
        "affiliate_url": "https://www.spafinder.com/couples-retreat?ref=giftgenius",
        "retailer": "SpaFinder",
        "delivery_days": 0,
    },
    {
        "title": "Wine Tasting Weekend Getaway",
        "description": "Two-night stay at vineyard resort with private wine tours and gourmet dining",
        "price": 599.99,
        "category": "experiences",
        "occasion": "birthday",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1510812431401-41d2bd2722f3",
        "affiliate_url": "https://www.viator.com/wine-weekend?click=affiliate",
        "retailer": "Viator",
        "delivery_days": 0,
    },
    {
        "title": "Private Cooking Class for Two",
        "description": "Learn to cook a 5-course Italian meal with a professional chef",
        "price": 189.99,
        "category": "experiences",
        "occasion": "just-because",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136",
        "affiliate_url": "https://www.masterclass.com/cooking-couples?ref=giftgenius",
        "retailer": "MasterClass",
        "delivery_days": 0,
    },
    {
        "title": "Hot Air Balloon Sunrise Ride",
        "description": "Romantic sunrise hot air balloon ride with champagne breakfast",
        "price": 425.00,
        "category": "experiences",
        "occasion": "anniversary",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d",
        "affiliate_url": "https://www.viator.com/hot-air-balloon?source=affiliate",
        "retailer": "Viator",
        "delivery_days": 0,
    },
    {
        "title": "Couples Dance Lessons Package",
        "description": "8-week salsa and ballroom dance lessons for beginners",
        "price": 299.99,
        "category": "experiences",
        "occasion": "valentine",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1524594152303-9fd13543fe6e",
        "affiliate_url": "https://www.groupon.com/dance-lessons?ref=giftgenius",
        "retailer": "Groupon",
        "delivery_days": 0,
    },
    {
        "title": "Luxury Silk Pillowcase Set",
        "description": "Mulberry silk pillowcases for better sleep and skincare",
        "price": 129.99,
        "category": "home",
        "occasion": "christmas",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1587222318667-31212ce2828d",
        "affiliate_url": "https://www.brooklinen.com/silk-pillowcase?source=affiliate",
        "retailer": "Brooklinen",
        "delivery_days": 2,
    },
    {
        "title": "Smart Photo Frame",
        "description": "WiFi digital frame to share photos instantly from anywhere",
        "price": 199.99,
        "category": "home",
        "occasion": "birthday",
        "relationship_stage": "married",
        "image_url": "https://images.unsplash.com/photo-1565193566173-7a0ee3dbe261",
        "affiliate_url": "https://www.amazon.com/dp/B09ABC789?tag=giftgenius-20",
        "retailer": "Amazon",
        "delivery_days": 1,
    },
    {
        "title": "Personalized Cutting Board",
        "description": "Bamboo cutting board engraved with your names and anniversary date",
        "price": 65.99,
        "category": "home",
        "occasion": "anniversary",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1607622750671-6cd9a99eabd1",
        "affiliate_url": "https://www.etsy.com/listing/custom-cutting-board?click_key=affiliate",
        "retailer": "Etsy",
        "delivery_days": 6,
    },
    {
        "title": "Couples Memory Book",
        "description": "Beautiful hardcover book to document your relationship journey",
        "price": 49.99,
        "category": "home",
        "occasion": "valentine",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1532012197267-da84d127e765",
        "affiliate_url": "https://www.uncommongoods.com/product/memory-book?source=affiliate",
        "retailer": "Uncommon Goods",
        "delivery_days": 3,
    },
    {
        "title": "Aromatherapy Diffuser Set",
        "description": "Ultrasonic diffuser with 12 essential oils for relaxation",
        "price": 89.99,
        "category": "home",
        "occasion": "just-because",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1608181831688-b2a476cb100c",
        "affiliate_url": "https://www.amazon.com/dp/B07XYZ456?tag=giftgenius-20",
        "retailer": "Amazon",
        "delivery_days": 2,
    },
    {
        "title": "Cashmere Wrap Scarf",
        "description": "Luxuriously soft 100% cashmere scarf in her favorite color",
        "price": 149.99,
        "category": "fashion",
        "occasion": "christmas",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1520903920243-00d872a2d1c9",
        "affiliate_url": "https://www.nordstrom.com/cashmere-scarf?ref=giftgenius",
        "retailer": "Nordstrom",
        "delivery_days": 3,
    },
    {
        "title": "Designer Leather Handbag",
        "description": "Classic leather tote bag perfect for work and weekends",
        "price": 295.00,
        "category": "fashion",
        "occasion": "birthday",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1584917865442-de89df76afd3",
        "affiliate_url": "https://www.amazon.com/dp/B08DEF123?tag=giftgenius-20",
        "retailer": "Amazon",
        "delivery_days": 2,
    },
    {
        "title": "Silk Pajama Set",
        "description": "Luxurious silk pajama set with personalized monogram",
        "price": 159.99,
        "category": "fashion",
        "occasion": "valentine",
        "relationship_stage": "married",
        "image_url": "https://images.unsplash.com/photo-1515886657613-9f3515b0c78f",
        "affiliate_url": "https://www.lilysilk.com/pajama-set?source=affiliate",
        "retailer": "LilySilk",
        "delivery_days": 4,
    },
    {
        "title": "Cozy UGG Slippers",
        "description": "Sheepskin-lined slippers for ultimate comfort at home",
        "price": 119.99,
        "category": "fashion",
        "occasion": "christmas",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1603487742131-4160ec999306",
        "affiliate_url": "https://www.ugg.com/slippers-women?ref=affiliate",
        "retailer": "UGG",
        "delivery_days": 2,
    },
    {
        "title": "Charlotte Tilbury Makeup Set",
        "description": "Complete makeup collection with bestselling products",
        "price": 225.00,
        "category": "beauty",
        "occasion": "birthday",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1512496015851-a90fb38ba796",
        "affiliate_url": "https://www.sephora.com/charlotte-tilbury-set?ref=giftgenius",
        "retailer": "Sephora",
        "delivery_days": 2,
    },
    {
        "title": "Jo Malone Perfume Collection",
        "description": "Set of three signature fragrances in travel sizes",
        "price": 180.00,
        "category": "beauty",
        "occasion": "valentine",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1541643600914-78b084683601",
        "affiliate_url": "https://www.nordstrom.com/jo-malone-set?source=affiliate",
        "retailer": "Nordstrom",
        "delivery_days": 3,
    },
    {
        "title": "Skincare Fridge & Premium Set",
        "description": "Mini beauty fridge with Korean skincare essentials",
        "price": 149.99,
        "category": "beauty",
        "occasion": "just-because",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1570194065650-d99fb4b38e39",
        "affiliate_url": "https://www.amazon.com/dp/B09GHI789?tag=giftgenius-20",
        "retailer": "Amazon",
        "delivery_days": 2,
    },
    {
        "title": "Dyson Airwrap Styler",
        "description": "Revolutionary hair styling tool that uses air, not extreme heat",
        "price": 599.99,
        "category": "beauty",
        "occasion": "christmas",
        "relationship_stage": "married",
        "image_url": "https://images.unsplash.com/photo-1522337360788-8b13dee7a37e",
        "affiliate_url": "https://www.dyson.com/airwrap?ref=giftgenius",
        "retailer": "Dyson",
        "delivery_days": 3,
    },
    {
        "title": "Luxury Bath Bomb Gift Set",
        "description": "Handmade organic bath bombs with essential oils and dried flowers",
        "price": 69.99,
        "category": "beauty",
        "occasion": "just-because",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1540555700478-4be289fbecef",
        "affiliate_url": "https://www.lush.com/bath-bomb-set?source=affiliate",
        "retailer": "Lush",
        "delivery_days": 2,
    },
    {
        "title": "Apple AirPods Pro",
        "description": "Noise-cancelling wireless earbuds with personalized spatial audio",
        "price": 249.99,
        "category": "tech",
        "occasion": "birthday",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1588156979435-379b9ac66248",
        "affiliate_url": "https://www.amazon.com/dp/B0BDHWDR12?tag=giftgenius-20",
        "retailer": "Amazon",
        "delivery_days": 1,
    },
    {
        "title": "Polaroid Instant Camera Bundle",
        "description": "Retro instant camera with film, case, and photo album",
        "price": 159.99,
        "category": "tech",
        "occasion": "valentine",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1526170375885-4d8ecf77b99f",
        "affiliate_url": "https://www.urbanoutfitters.com/polaroid-bundle?ref=affiliate",
        "retailer": "Urban Outfitters",
        "delivery_days": 3,
    },
    {
        "title": "Kindle Paperwhite Signature",
        "description": "Waterproof e-reader with wireless charging and auto-adjusting light",
        "price": 189.99,
        "category": "tech",
        "occasion": "christmas",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1428908728789-d2de25dbd4e2",
        "affiliate_url": "https://www.amazon.com/dp/B08KTZ8249?tag=giftgenius-20",
        "retailer": "Amazon",
        "delivery_days": 1,
    },
    {
        "title": "Couple's Smart Bracelets",
        "description": "Touch bracelets that let you feel your partner's touch from anywhere",
        "price": 115.00,
        "category": "tech",
        "occasion": "anniversary",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1523170335258-f5ed11844a49",
        "affiliate_url": "https://www.bond-touch.com/products/bond-touch-pair?ref=giftgenius",
        "retailer": "Bond Touch",
        "delivery_days": 4,
    },
    {
        "title": "Custom Song Just For Her",
        "description": "Professional songwriter creates a personalized love song based on your story",
        "price": 299.99,
        "category": "unique",
        "occasion": "anniversary",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1511671782779-c97d3d27a1d4",
        "affiliate_url": "https://www.songfinch.com/custom-song?source=affiliate",
        "retailer": "Songfinch",
        "delivery_days": 7,
    },
    {
        "title": "Name a Star Package",
        "description": "Officially name a star after her with certificate and star map",
        "price": 79.99,
        "category": "unique",
        "occasion": "valentine",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1419242902214-272b3f66ee7a",
        "affiliate_url": "https://www.starregistry.com/name-star?ref=giftgenius",
        "retailer": "Star Registry",
        "delivery_days": 5,
    },
    {
        "title": "Monthly Flower Subscription",
        "description": "6-month subscription for fresh bouquets delivered monthly",
        "price": 240.00,
        "category": "unique",
        "occasion": "birthday",
        "relationship_stage": "married",
        "image_url": "https://images.unsplash.com/photo-1563241527-3004b7be0ffd",
        "affiliate_url": "https://www.bloomsybox.com/subscription?source=affiliate",
        "retailer": "BloomsyBox",
        "delivery_days": 0,
    },
    {
        "title": "Adventure Challenge Couples Book",
        "description": "Scratch-off adventure book with 50 unique date ideas",
        "price": 39.99,
        "category": "unique",
        "occasion": "just-because",
        "relationship_stage": "dating",
        "image_url": "https://images.unsplash.com/photo-1516450360452-9312f5e86fc7",
        "affiliate_url": "https://www.amazon.com/dp/B07DWKQM8J?tag=giftgenius-20",
        "retailer": "Amazon",
        "delivery_days": 2,
    },
    {
        "title": "Personalized Comic Book",
        "description": "Custom illustrated comic book telling your love story",
        "price": 189.99,
        "category": "unique",
        "occasion": "anniversary",
        "relationship_stage": "serious",
        "image_url": "https://images.unsplash.com/photo-1612036782180-6f0b6cd846fe",
        "affiliate_url": "https://www.uncommongoods.com/product/custom-comic?source=affiliate",
        "retailer": "Uncommon Goods",
        "delivery_days": 10,
    },
    {
        "title": "Date Night Subscription Box",
        "description": "3-month subscription with planned date nights delivered monthly",
        "price": 149.99,
        "category": "unique",
        "occasion": "valentine",
        "relationship_stage": "engaged",
        "image_url": "https://images.unsplash.com/photo-1533073526757-2c8ca1df9f1c",
        "affiliate_url": "https://www.datebox.com/subscription?ref=giftgenius",
        "retailer": "DateBox",
        "delivery_days": 3,
    },
]

# gift_id refers to the 1-based position in GIFTS
TESTIMONIALS: list[dict[str, Any]] = [
    {"gift_id": 1, "reviewer_name": "Michael R.", "relationship_length": "Dating 8 months", "partner_rating": 5, "testimonial_text": "She literally cried when she opened it. It's been 3 months and she still wears it every single day. The quality is amazing and the customization made it so personal.", "occasion": "anniversary"},
    {"gift_id": 1, "reviewer_name": "David L.", "relationship_length": "Together 2 years", "partner_rating": 5, "testimonial_text": "Perfect anniversary gift! She loved that I remembered the exact date and location of our first kiss. Now it's her favorite piece of jewelry.", "occasion": "anniversary"},
    {"gift_id": 1, "reviewer_name": "Tom S.", "relationship_length": "Dating 1 year", "partner_rating": 4, "testimonial_text": "Great quality and fast shipping. She really appreciated the thought behind it. Only wish the chain was a bit longer.", "occasion": "anniversary"},
    {"gift_id": 1, "reviewer_name": "James K.", "relationship_length": "Engaged", "partner_rating": 5, "testimonial_text": "My fiancée was speechless. She immediately posted it on Instagram and all her friends want one now. Worth every penny.", "occasion": "anniversary"},
    {"gift_id": 2, "reviewer_name": "Chris P.", "relationship_length": "Dating 4 months", "partner_rating": 5, "testimonial_text": "She wears it every day to work. Simple but meaningful, and she loved that I knew her birthstone.", "occasion": "birthday"},
    {"gift_id": 2, "reviewer_name": "Steve W.", "relationship_length": "Dating 6 months", "partner_rating": 4, "testimonial_text": "Good quality for the price. Arrived quickly and she liked that it was subtle enough for daily wear.", "occasion": "birthday"},
    {"gift_id": 2, "reviewer_name": "Ryan M.", "relationship_length": "Together 1 year", "partner_rating": 5, "testimonial_text": "She appreciated that it wasn't too flashy. Perfect for someone who likes delicate jewelry. Her friends all complimented it.", "occasion": "birthday"},
    {"gift_id": 3, "reviewer_name": "Paul H.", "relationship_length": "Engaged 6 months", "partner_rating": 5, "testimonial_text": "These matched perfectly with her engagement ring style. She wears them to every special occasion now.", "occasion": "valentine"},
    {"gift_id": 3, "reviewer_name": "Mark T.", "relationship_length": "Engaged 1 year", "partner_rating": 4, "testimonial_text": "Beautiful earrings, she loved the symbolism. Packaging could have been nicer but the product itself is excellent.", "occasion": "valentine"},
    {"gift_id": 3, "reviewer_name": "Alex B.", "relationship_length": "Engaged 3 months", "partner_rating": 5, "testimonial_text": "She said they were exactly her style. I was nervous about buying jewelry online but these exceeded expectations.", "occasion": "valentine"},
    {"gift_id": 4, "reviewer_name": "Nick J.", "relationship_length": "Dating 5 months", "partner_rating": 4, "testimonial_text": "Cool concept and she liked the story behind it. The leather is good quality and the engraving is clear.", "occasion": "just-because"},
    {"gift_id": 4, "reviewer_name": "Brian C.", "relationship_length": "Dating 7 months", "partner_rating": 5, "testimonial_text": "She was so surprised I remembered the exact spot where we met. It's become her lucky bracelet.", "occasion": "just-because"},
    {"gift_id": 4, "reviewer_name": "Kevin D.", "relationship_length": "Dating 3 months", "partner_rating": 3, "testimonial_text": "Nice idea but the clasp broke after a month. Customer service was good though and sent a replacement.", "occasion": "just-because"},
    {"gift_id": 5, "reviewer_name": "Robert M.", "relationship_length": "Married 5 years", "partner_rating": 5, "testimonial_text": "Best gift I've given in years. We both needed this and it brought us closer together. She still talks about how relaxing it was.", "occasion": "anniversary"},
    {"gift_id": 5, "reviewer_name": "William K.", "relationship_length": "Married 3 years", "partner_rating": 5, "testimonial_text": "Took all the planning stress off me and she absolutely loved being pampered. The private hot tub was the highlight.", "occasion": "anniversary"},
    {"gift_id": 5, "reviewer_name": "John S.", "relationship_length": "Married 7 years", "partner_rating": 5, "testimonial_text": "After kids and work stress, this was exactly what we needed. She said it was better than any physical gift.", "occasion": "anniversary"},
    {"gift_id": 5, "reviewer_name": "Daniel P.", "relationship_length": "Married 2 years", "partner_rating": 4, "testimonial_text": "Great experience overall. Only downside was booking availability but once we got there it was perfect.", "occasion": "anniversary"},
    {"gift_id": 6, "reviewer_name": "Matthew L.", "relationship_length": "Engaged 1 year", "partner_rating": 5, "testimonial_text": "She's been wanting to do this for ages. The vineyard was beautiful and the private tours made it extra special.", "occasion": "birthday"},
    {"gift_id": 6, "reviewer_name": "Joseph A.", "relationship_length": "Engaged 6 months", "partner_rating": 5, "testimonial_text": "Perfect birthday surprise. She loved the wine education aspect and we discovered our new favorite wine together.", "occasion": "birthday"},
    {"gift_id": 6, "reviewer_name": "Charles R.", "relationship_length": "Engaged 2 years", "partner_rating": 4, "testimonial_text": "Great getaway but pricey. She loved it though and that's what matters. The gourmet dinners were incredible.", "occasion": "birthday"},
    {"gift_id": 7, "reviewer_name": "Andrew T.", "relationship_length": "Together 1.5 years", "partner_rating": 5, "testimonial_text": "We had so much fun! She loved that it was something we could do together. Now we cook that meal monthly.", "occasion": "just-because"},
    {"gift_id": 7, "reviewer_name": "Joshua N.", "relationship_length": "Together 2 years", "partner_rating": 5, "testimonial_text": "She's been wanting to improve her cooking and this was perfect. The chef was amazing and we learned so much.", "occasion": "just-because"},
    {"gift_id": 7, "reviewer_name": "Christopher G.", "relationship_length": "Together 1 year", "partner_rating": 4, "testimonial_text": "Fun experience and she enjoyed it. Would recommend checking dietary restrictions beforehand though.", "occasion": "just-because"},
    {"gift_id": 7, "reviewer_name": "Brandon M.", "relationship_length": "Together 8 months", "partner_rating": 5, "testimonial_text": "Best date night we've had! She posted so many pictures and we use the recipes all the time now.", "occasion": "just-because"},
    {"gift_id": 8, "reviewer_name": "Justin F.", "relationship_length": "Engaged", "partner_rating": 5, "testimonial_text": "Proposed during the ride and she said it was the most romantic moment of her life. Worth every penny and more.", "occasion": "anniversary"},
    {"gift_id": 8, "reviewer_name": "Eric H.", "relationship_length": "Engaged 8 months", "partner_rating": 5, "testimonial_text": "She had this on her bucket list. The sunrise was incredible and the champagne breakfast was a nice touch.", "occasion": "anniversary"},
    {"gift_id": 8, "reviewer_name": "Adam W.", "relationship_length": "Engaged 1 year", "partner_rating": 4, "testimonial_text": "Amazing experience but she's afraid of heights so was nervous at first. Once up there she loved it though.", "occasion": "anniversary"},
    {"gift_id": 9, "reviewer_name": "Tyler K.", "relationship_length": "Dating 6 months", "partner_rating": 5, "testimonial_text": "She always wanted to learn salsa. Now it's our Thursday night tradition and she loves showing off at parties.", "occasion": "valentine"},
    {"gift_id": 9, "reviewer_name": "Aaron D.", "relationship_length": "Dating 8 months", "partner_rating": 4, "testimonial_text": "Fun way to spend time together. She enjoyed it more than I expected and we've gotten pretty good!", "occasion": "valentine"},
    {"gift_id": 9, "reviewer_name": "Nathan R.", "relationship_length": "Dating 4 months", "partner_rating": 5, "testimonial_text": "Great for breaking the ice and getting comfortable with each other. She said it was the most creative gift she's received.", "occasion": "valentine"},
    {"gift_id": 10, "reviewer_name": "Jason M.", "relationship_length": "Together 2.5 years", "partner_rating": 5, "testimonial_text": "She noticed the difference in her hair and skin immediately. Practical but luxurious - perfect combo.", "occasion": "christmas"},
    {"gift_id": 10, "reviewer_name": "Kyle B.", "relationship_length": "Together 1.5 years", "partner_rating": 4, "testimonial_text": "She loved how thoughtful it was for her skincare routine. Good quality and the color options were nice.", "occasion": "christmas"},
    {"gift_id": 10, "reviewer_name": "Timothy J.", "relationship_length": "Together 3 years", "partner_rating": 5, "testimonial_text": "She raved about these to all her friends. Said it's the gift that keeps on giving every night.", "occasion": "christmas"},
    {"gift_id": 10, "reviewer_name": "Scott P.", "relationship_length": "Together 2 years", "partner_rating": 5, "testimonial_text": "Best practical gift I've given. She said her hair has never looked better and she sleeps more comfortably.", "occasion": "christmas"},
    {"gift_id": 11, "reviewer_name": "Jeremy C.", "relationship_length": "Married 4 years", "partner_rating": 5, "testimonial_text": "She cried when she saw all the photos I had loaded. Now family members send photos directly to it.", "occasion": "birthday"},
    {"gift_id": 12, "reviewer_name": "Sean M.", "relationship_length": "Engaged 1.5 years", "partner_rating": 5, "testimonial_text": "She displays it in the kitchen rather than using it. Says it's too pretty to cut on!", "occasion": "anniversary"},
    {"gift_id": 13, "reviewer_name": "Bryan T.", "relationship_length": "Together 1 year", "partner_rating": 5, "testimonial_text": "We fill it out together now. She loves documenting our adventures and it's become our favorite activity.", "occasion": "valentine"},
    {"gift_id": 14, "reviewer_name": "Lucas W.", "relationship_length": "Dating 7 months", "partner_rating": 5, "testimonial_text": "Perfect for her self-care routine. She said the lavender helps her sleep so much better.", "occasion": "just-because"},
    {"gift_id": 15, "reviewer_name": "Ethan J.", "relationship_length": "Together 2 years", "partner_rating": 5, "testimonial_text": "Incredibly soft and she wears it constantly. I picked her favorite color and she noticed immediately.", "occasion": "christmas"},
    {"gift_id": 16, "reviewer_name": "Zachary T.", "relationship_length": "Engaged", "partner_rating": 5, "testimonial_text": "She'd been eyeing this bag for months. The look on her face was priceless. Uses it every day for work.", "occasion": "birthday"},
    {"gift_id": 17, "reviewer_name": "Blake N.", "relationship_length": "Married 3 years", "partner_rating": 5, "testimonial_text": "She feels like royalty wearing them. The monogram was a perfect touch. She bought a second pair!", "occasion": "valentine"},
    {"gift_id": 18, "reviewer_name": "Chase L.", "relationship_length": "Dating 6 months", "partner_rating": 5, "testimonial_text": "She lives in these now. Perfect for work from home days. Her feet are always warm and happy.", "occasion": "christmas"},
    {"gift_id": 19, "reviewer_name": "Spencer H.", "relationship_length": "Together 1.5 years", "partner_rating": 5, "testimonial_text": "Did my research on her favorite brand. She was impressed I knew Charlotte Tilbury was her favorite.", "occasion": "birthday"},
    {"gift_id": 20, "reviewer_name": "Garrett M.", "relationship_length": "Engaged", "partner_rating": 5, "testimonial_text": "She loved having travel sizes to try different scents. Found her new signature fragrance.", "occasion": "valentine"},
    {"gift_id": 21, "reviewer_name": "Henry C.", "relationship_length": "Dating 5 months", "partner_rating": 5, "testimonial_text": "She's obsessed with skincare and this was perfect. The Korean products were a great bonus.", "occasion": "just-because"},
    {"gift_id": 22, "reviewer_name": "Oliver R.", "relationship_length": "Married 4 years", "partner_rating": 5, "testimonial_text": "Expensive but worth it. She says it cut her styling time in half and her hair looks salon-perfect daily.", "occasion": "christmas"},
    {"gift_id": 23, "reviewer_name": "Noah D.", "relationship_length": "Dating 6 months", "partner_rating": 5, "testimonial_text": "Perfect relaxation gift. She uses one every Sunday for her self-care routine.", "occasion": "just-because"},
    {"gift_id": 24, "reviewer_name": "Carter J.", "relationship_length": "Together 1.5 years", "partner_rating": 5, "testimonial_text": "She uses them for everything - work calls, gym, commute. Says the noise cancellation is life-changing.", "occasion": "birthday"},
    {"gift_id": 25, "reviewer_name": "Wyatt B.", "relationship_length": "Dating 5 months", "partner_rating": 5, "testimonial_text": "She takes it everywhere now. We have a wall full of instant photos from our dates.", "occasion": "valentine"},
    {"gift_id": 26, "reviewer_name": "Bentley R.", "relationship_length": "Engaged", "partner_rating": 5, "testimonial_text": "She's a bookworm and this was perfect. Loves reading in the bath without worry. Already read 10 books on it.", "occasion": "christmas"},
    {"gift_id": 27, "reviewer_name": "Jaxon W.", "relationship_length": "Together 2 years", "partner_rating": 5, "testimonial_text": "We're long distance and these keep us connected. She loves sending me touches throughout the day.", "occasion": "anniversary"},
    {"gift_id": 28, "reviewer_name": "Asher L.", "relationship_length": "Engaged", "partner_rating": 5, "testimonial_text": "Most meaningful gift I've ever given. She listens to it daily and played it at our engagement party.", "occasion": "anniversary"},
    {"gift_id": 29, "reviewer_name": "Eli R.", "relationship_length": "Dating 8 months", "partner_rating": 5, "testimonial_text": "She's into astronomy so this was perfect. Framed the certificate and hung it above her desk.", "occasion": "valentine"},
    {"gift_id": 30, "reviewer_name": "Micah F.", "relationship_length": "Married 3 years", "partner_rating": 5, "testimonial_text": "She gets excited every month when they arrive. Says it's like getting a gift 12 times.", "occasion": "birthday"},
    {"gift_id": 31, "reviewer_name": "Rowan N.", "relationship_length": "Dating 5 months", "partner_rating": 5, "testimonial_text": "We do one adventure every week now. It's brought us so much closer and created amazing memories.", "occasion": "just-because"},
    {"gift_id": 32, "reviewer_name": "Theo K.", "relationship_length": "Together 2 years", "partner_rating": 5, "testimonial_text": "Completely unique and personal. She shows it to everyone who visits. The art style was perfect.", "occasion": "anniversary"},
    {"gift_id": 33, "reviewer_name": "Milo T.", "relationship_length": "Engaged", "partner_rating": 5, "testimonial_text": "Takes the pressure off planning dates. She loves the surprise element and activities are actually fun.", "occasion": "valentine"},
]


async def seed_catalog(session: AsyncSession) -> bool:
    """Insert the demo catalog when the gifts table is empty. Returns True if rows were added."""
    existing = (await session.execute(select(func.count(Gift.id)))).scalar() or 0
    if existing:
        logger.info(f"Catalog already holds {existing} gifts, skipping seed.")
        return False

    gifts = [Gift(**data) for data in GIFTS]
    session.add_all(gifts)
    await session.flush()

    for data in TESTIMONIALS:
        gift = gifts[data["gift_id"] - 1]
        session.add(Testimonial(**{**data, "gift_id": gift.id}))

    await session.commit()
    logger.info(f"Seeded {len(gifts)} gifts and {len(TESTIMONIALS)} testimonials.")
    return True
