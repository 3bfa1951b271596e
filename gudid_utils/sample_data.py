# sample_data.py
"""
Bundled sample packing list, loaded on first run and by the "Load sample" button.
"""

SAMPLE_CSV = """Suppliername,deliverdate,customer,DeviceName,Numbers,ModelNum
Medtronic Taiwan,2024-01-03,Taipei Veterans General Hospital,Insulin Pump,12,MMT-780G
Medtronic Taiwan,2024-01-03,National Taiwan University Hospital,CGM Sensor,40,MMT-7040
Abbott Medical,2024-01-05,Chang Gung Memorial Hospital,FreeStyle Libre Sensor,60,FSL-3
Boston Scientific,2024-01-08,Taipei Veterans General Hospital,Coronary Stent,8,SYN-4820
Abbott Medical,2024-01-08,Kaohsiung Medical University Hospital,FreeStyle Libre Sensor,35,FSL-3
Johnson & Johnson,2024-01-10,China Medical University Hospital,Surgical Stapler,20,ECH-60
Medtronic Taiwan,2024-01-12,Chang Gung Memorial Hospital,Pacemaker,4,AZURE-XT
Boston Scientific,2024-01-12,National Taiwan University Hospital,Guidewire,50,CHV-014
Johnson & Johnson,2024-01-15,Taipei Veterans General Hospital,Surgical Stapler,15,ECH-60
Abbott Medical,2024-01-15,National Taiwan University Hospital,Coronary Stent,10,XIE-SRB
Medtronic Taiwan,2024-01-18,Kaohsiung Medical University Hospital,CGM Sensor,25,MMT-7040
Terumo Taiwan,2024-01-18,China Medical University Hospital,Infusion Set,120,TE-171
Terumo Taiwan,2024-01-20,Chang Gung Memorial Hospital,Infusion Set,80,TE-171
Boston Scientific,2024-01-22,Chang Gung Memorial Hospital,Coronary Stent,6,SYN-4820
Medtronic Taiwan,2024-01-22,Taipei Veterans General Hospital,Insulin Pump,7,MMT-780G
Abbott Medical,2024-01-25,Taipei Veterans General Hospital,Pacemaker,3,ASSURITY
Johnson & Johnson,2024-01-25,Kaohsiung Medical University Hospital,Suture Kit,200,VCP-310
Terumo Taiwan,2024-01-28,National Taiwan University Hospital,Syringe 10ml,300,SS-10ESZ
Medtronic Taiwan,2024-01-30,China Medical University Hospital,Pacemaker,2,AZURE-XT
Boston Scientific,2024-01-30,Kaohsiung Medical University Hospital,Guidewire,45,CHV-014
Abbott Medical,2024-02-02,China Medical University Hospital,FreeStyle Libre Sensor,50,FSL-3
Terumo Taiwan,2024-02-02,Taipei Veterans General Hospital,Syringe 10ml,250,SS-10ESZ
Johnson & Johnson,2024-02-05,National Taiwan University Hospital,Suture Kit,150,VCP-310
Medtronic Taiwan,2024-02-05,Chang Gung Memorial Hospital,CGM Sensor,30,MMT-7040
"""
