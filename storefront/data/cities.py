"""
Road distances from the origin (km).

Measured from: Imaara Mall, Nairobi, Kenya
Regenerated by `update-distances`; edit by hand only to add or rename cities.
"""

from storefront.schemas.shipping import CityDistance

KENYAN_CITIES = (
    CityDistance(name='Nairobi', distance_km=12),
    CityDistance(name='Ongata Rongai', distance_km=27),
    CityDistance(name='Ngong', distance_km=35),
    CityDistance(name='Ruaka', distance_km=28),
    CityDistance(name='Kiambu', distance_km=27),
    CityDistance(name='Ruiru', distance_km=29),
    CityDistance(name='Athi River', distance_km=19),
    CityDistance(name='Kitengela', distance_km=21),
    CityDistance(name='Juja', distance_km=37),
    CityDistance(name='Limuru', distance_km=49),
    CityDistance(name='Thika', distance_km=49),
    CityDistance(name='Machakos', distance_km=53),
    CityDistance(name="Murang'a", distance_km=89),
    CityDistance(name='Naivasha', distance_km=101),
    CityDistance(name='Kirinyaga', distance_km=113),
    CityDistance(name='Narok', distance_km=153),
    CityDistance(name='Nyeri', distance_km=155),
    CityDistance(name='Nakuru', distance_km=171),
    CityDistance(name='Meru', distance_km=230),
    CityDistance(name='Mwingi', distance_km=176),
    CityDistance(name='Nyahururu', distance_km=197),
    CityDistance(name='Nanyuki', distance_km=199),
    CityDistance(name='Kajiado', distance_km=67),
    CityDistance(name='Isiolo', distance_km=277),
    CityDistance(name='Kericho', distance_km=274),
    CityDistance(name='Nandi', distance_km=323),
    CityDistance(name='Kisii', distance_km=316),
    CityDistance(name='Eldoret', distance_km=323),
    CityDistance(name='Uasin Gishu', distance_km=338),
    CityDistance(name='Kisumu', distance_km=365),
    CityDistance(name='Homabay', distance_km=386),
    CityDistance(name='Kakamega', distance_km=390),
    CityDistance(name='Siaya', distance_km=434),
    CityDistance(name='Migori', distance_km=382),
    CityDistance(name='Kitale', distance_km=398),
    CityDistance(name='Trans Nzoia', distance_km=408),
    CityDistance(name='Webuye', distance_km=395),
    CityDistance(name='Busia', distance_km=476),
    CityDistance(name='Bungoma', distance_km=421),
    CityDistance(name='West Pokot', distance_km=450),
    CityDistance(name='Kapenguria', distance_km=427),
    CityDistance(name='Samburu', distance_km=433),
    CityDistance(name='Embu', distance_km=134),
    CityDistance(name='Garissa', distance_km=371),
    CityDistance(name='Wajir', distance_km=685),
    CityDistance(name='Mandera', distance_km=1140),
    CityDistance(name='Marsabit', distance_km=534),
    CityDistance(name='Voi', distance_km=319),
    CityDistance(name='Taita', distance_km=329),
    CityDistance(name='Mombasa', distance_km=473),
    CityDistance(name='Kwale', distance_km=505),
    CityDistance(name='Kilifi', distance_km=497),
    CityDistance(name='Malindi', distance_km=485),
    CityDistance(name='Tana River', distance_km=450),
    CityDistance(name='Lamu', distance_km=700),
    CityDistance(name='Turkana', distance_km=710),
    CityDistance(name='Lodwar', distance_km=609),
    CityDistance(name='Moyale', distance_km=779),
)
